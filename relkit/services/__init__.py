"""Services used by CLI commands."""
