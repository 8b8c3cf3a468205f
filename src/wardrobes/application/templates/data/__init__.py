"""Bundled wardrobe template configurations."""
