from .persistence import IPersistencePort

__all__ = [
    "IPersistencePort",
]
