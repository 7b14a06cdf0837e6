"""Authentication providers."""

from .base import AuthProvider
from .bearer import BearerToken
from .oauth2_user import OAuth2User

__all__ = ["AuthProvider", "BearerToken", "OAuth2User"]
