"""Sueta user and post services."""

__version__ = "1.0.0"
