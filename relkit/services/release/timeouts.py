from __future__ import annotations

# gh release operations
GH_TIMEOUT_SECONDS = 60.0
