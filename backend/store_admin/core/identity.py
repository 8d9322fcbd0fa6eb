from dataclasses import dataclass
from typing import Optional

from fastapi import Request


@dataclass(frozen=True)
class IdentityContext:
    """The caller as resolved by the identity provider. ``user_id`` is None for anonymous calls."""

    user_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)


ANONYMOUS = IdentityContext()


class HeaderIdentityProvider:
    """
    Reads the caller's user id from a request header.

    The header is expected to be set by the authenticating proxy in front of
    the API after it has verified the session; the API itself never sees
    credentials.
    """

    def __init__(self, header_name: str):
        self.header_name = header_name

    def __call__(self, request: Request) -> IdentityContext:
        user_id = (request.headers.get(self.header_name) or "").strip()
        if not user_id:
            return ANONYMOUS
        return IdentityContext(user_id=user_id)
