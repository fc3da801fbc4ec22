"""Taxatree: an in-memory catalog of taxonomic classification paths."""

__version__ = "1.0.0"
