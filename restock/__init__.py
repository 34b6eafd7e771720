"""eBay Trading API restock bot."""

__version__ = "1.0.0"
