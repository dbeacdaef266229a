"""Async clients for the Open Food Facts product, facets and prices APIs."""

__version__ = "0.1.0"
