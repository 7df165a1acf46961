"""RDAP bootstrap registries, response models and client errors."""

__version__ = "0.1.0"