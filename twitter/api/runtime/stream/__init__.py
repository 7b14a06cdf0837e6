"""Streaming runtime abstractions."""

from .decoder import StreamDecoder

__all__ = ["StreamDecoder"]
