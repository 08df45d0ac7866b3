"""
Token authentication used by the intake API.

Kept in its own module so that ``REST_FRAMEWORK`` settings can reference
it without importing any view code while DRF is initialising.
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """DRF token authentication with the ``Token`` keyword.

    Clients send ``Authorization: Token <key>`` with the key returned by
    the login endpoint.
    """

    keyword = 'Token'
