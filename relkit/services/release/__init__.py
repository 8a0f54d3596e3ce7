"""Release automation: version bumps, changelog fragments, tags and GitHub releases."""
