"""Top-level searchpaths commands."""
