"""Shared route helpers."""

from fastapi import Header


def calendar_token(authorization: str | None = Header(default=None)) -> str | None:
    """Calendar bearer credential from the ``Authorization`` header.

    Returns:
        The token, or None if the header is absent or not a bearer credential
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
