"""Users endpoint group."""

from .connector import Users

__all__ = ["Users"]
