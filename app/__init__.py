"""
Artwork Catalog API

A small REST backend for cataloging artworks with shared tags.
"""

__version__ = "1.0.0"
