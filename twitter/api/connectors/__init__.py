"""Endpoint groups.

Each group pairs a module of RestEndpointSpec definitions (endpoints.py) with
a thin class exposing typed methods over a shared RestRunner.
"""

from .tweets import Tweets
from .users import Users

__all__ = ["Tweets", "Users"]
