"""High-level clients."""

from .client import Client

__all__ = ["Client"]
