"""HTML element builder and link-directory homepage generator."""
