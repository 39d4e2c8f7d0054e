"""Draw decorations."""
