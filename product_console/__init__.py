"""Product catalog management over an async relational store."""

__version__ = "0.1.0"
