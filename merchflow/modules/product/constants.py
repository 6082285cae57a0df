"""Catalog constants."""

# Product names containing any of these are flagged as popular in the catalog
POPULAR_KEYWORDS: tuple[str, ...] = ("business cards", "pens", "t-shirts", "banners")
