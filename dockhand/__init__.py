"""Typed Docker Engine API models and helpers: filters, versions, container and network settings."""

__version__ = "0.1.0"