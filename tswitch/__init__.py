"""Interactive theme switcher that rewrites application config files."""
