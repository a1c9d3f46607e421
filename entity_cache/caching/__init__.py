"""
Caching layer: bounded LRU cache with write-behind eviction to a
persistence port.
"""

from .bounded_cache import BoundedCache

__all__ = [
    "BoundedCache",
]
