"""
Request identity resolution.

The client asserts who it is on every request by sending its email in the
X-User-Email header (or an `email` query parameter). There is no session
table, token or signature: whatever email is presented selects the cart.
"""

import logging
from typing import Optional

from fastapi import Request

from ..core.errors import MissingIdentityError

logger = logging.getLogger(__name__)

IDENTITY_HEADER = "X-User-Email"


def resolve_identity(request: Request) -> Optional[str]:
    """Email asserted by the request, header first, then query string"""
    email = request.headers.get(IDENTITY_HEADER) or request.query_params.get("email")
    if email:
        email = email.strip()
    return email or None


class IdentityDependency:
    """
    FastAPI dependency returning the asserted email.

    Use `required=False` when the route has another place to look, such as
    an email field in the request body.
    """

    def __init__(self, required: bool = True):
        self.required = required

    async def __call__(self, request: Request) -> Optional[str]:
        email = resolve_identity(request)
        if email is None and self.required:
            logger.debug(f"No identity on {request.method} {request.url.path}")
            raise MissingIdentityError()
        return email


# Dependency instances
require_identity = IdentityDependency(required=True)
optional_identity = IdentityDependency(required=False)
