"""Tweets endpoint group."""

from .connector import Tweets

__all__ = ["Tweets"]
