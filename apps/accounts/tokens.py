"""
Token Service
=============

Issues and verifies the signed bearer tokens that identify API callers.

Tokens are simplejwt access tokens signed with ``SIMPLE_JWT['SIGNING_KEY']``
(``JWT_SECRET`` in the environment) and valid for
``SIMPLE_JWT['ACCESS_TOKEN_LIFETIME']`` (7 days). Besides the standard
``exp``/``iat``/``jti`` claims every token carries the identity claims
``userId``, ``username`` and ``role``.

Example::

    from apps.accounts.tokens import issue_token, verify_token

    token = issue_token(user)
    payload = verify_token(token)
    payload['userId'] == user.id  # True
"""

import logging
from typing import Optional

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '

IDENTITY_CLAIMS = ('userId', 'username', 'role')


def issue_token(user) -> str:
    """
    Issue a signed access token for a user.

    Each call produces a distinct token (fresh ``jti``) even for the same
    user and clock.

    Args:
        user: User instance to embed in the token

    Returns:
        Encoded token string
    """
    token = AccessToken.for_user(user)
    # for_user stores the id as a string on recent simplejwt releases
    token['userId'] = user.id
    token['username'] = user.username
    token['role'] = user.role
    return str(token)


def verify_token(token: str) -> Optional[dict]:
    """
    Verify a token and return its payload.

    Never raises: malformed tokens, bad signatures, expired tokens and
    tokens missing identity claims all return None.

    Args:
        token: Encoded token string

    Returns:
        Claims dict, or None if the token is invalid
    """
    try:
        access_token = AccessToken(token)
    except TokenError as e:
        logger.debug("Token rejected: %s", e)
        return None

    payload = dict(access_token.payload)
    if any(claim not in payload for claim in IDENTITY_CLAIMS):
        logger.debug("Token rejected: missing identity claims")
        return None

    try:
        payload['userId'] = int(payload['userId'])
    except (TypeError, ValueError):
        logger.debug("Token rejected: non-numeric userId")
        return None

    return payload


def extract_token_from_header(header_value: Optional[str]) -> Optional[str]:
    """
    Extract the token from an ``Authorization`` header value.

    Only ``"Bearer <token>"`` is recognised. The prefix is case-sensitive,
    whitespace around the token is trimmed, and bare tokens or other
    schemes yield None.
    """
    if not header_value:
        return None

    if not header_value.startswith(BEARER_PREFIX):
        return None

    token = header_value[len(BEARER_PREFIX):].strip()
    return token or None
