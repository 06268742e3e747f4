"""
Authorization Guard: bearer token authentication.

``BearerTokenAuthentication`` is the default DRF authentication class. Combined
with ``IsAuthenticated`` it yields:

- no usable ``Authorization`` header      -> 401
- token present but invalid or expired    -> 403
- token valid but the user no longer exists -> 401

Admin-only endpoints add ``apps.accounts.permissions.IsAdminRole``.
"""

import logging

from drf_spectacular.extensions import OpenApiAuthenticationExtension
from drf_spectacular.plumbing import build_bearer_security_scheme_object
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication

from .services import get_user_by_id
from .tokens import extract_token_from_header, verify_token

logger = logging.getLogger(__name__)


class InvalidTokenError(exceptions.APIException):
    """Token was supplied but failed verification."""
    status_code = 403
    default_detail = 'Invalid or expired token.'
    default_code = 'invalid_token'


def resolve_identity(header_value):
    """
    Resolve the caller's identity from an ``Authorization`` header value.

    Args:
        header_value: Raw header value (may be None)

    Returns:
        (User, payload) tuple, or None when no bearer token is present

    Raises:
        InvalidTokenError: If the token fails verification
        AuthenticationFailed: If the token's user no longer exists
    """
    token = extract_token_from_header(header_value)
    if token is None:
        return None

    payload = verify_token(token)
    if payload is None:
        raise InvalidTokenError()

    user = get_user_by_id(user_id=payload['userId'])
    if user is None or not user.is_active:
        logger.info("Token for missing user %s rejected", payload['userId'])
        raise exceptions.AuthenticationFailed('User not found.')

    return user, payload


class BearerTokenAuthentication(BaseAuthentication):
    """
    Authenticate requests carrying ``Authorization: Bearer <token>``.

    The resolved user becomes ``request.user`` and the token payload
    ``request.auth``.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        return resolve_identity(request.META.get('HTTP_AUTHORIZATION'))

    def authenticate_header(self, request):
        # Makes DRF answer NotAuthenticated/AuthenticationFailed with 401
        return f'{self.keyword} realm="api"'


class BearerTokenScheme(OpenApiAuthenticationExtension):
    """Document BearerTokenAuthentication as an HTTP bearer scheme."""

    target_class = 'apps.accounts.authentication.BearerTokenAuthentication'
    name = 'bearerAuth'

    def get_security_definition(self, auto_schema):
        return build_bearer_security_scheme_object(
            header_name='AUTHORIZATION',
            token_prefix=BearerTokenAuthentication.keyword,
            bearer_format='JWT',
        )
