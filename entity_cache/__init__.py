"""Bounded in-memory LRU cache in front of a durable key-value store."""

__version__ = "1.0.0"
