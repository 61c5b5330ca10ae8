"""
Catalog core for Cinestream.

This package bundles the TMDB metadata fetcher, the normalizer that turns
upstream movie/TV payloads into uniform title records, and the builder for
embeddable player URLs.
"""

__all__ = ["embed", "metadata_fetcher", "normalizer"]
