"""
Identity-provider token verification.

Sign-in itself happens at the external provider; this module only checks the
bearer token it issued and maps its claims onto our `users` columns.

Verification keys:
- AUTH_JWKS_URL set    -> signing key fetched from the provider's JWKS (RS256 family)
- AUTH_JWT_SECRET set  -> shared secret (HS256 by default; used in development and tests)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import jwt

from config import settings

ASYMMETRIC_ALGORITHMS = ["RS256", "RS384", "RS512", "ES256", "ES384"]


class IdentityError(RuntimeError):
    pass


@lru_cache(maxsize=4)
def _jwks_client(jwks_url: str) -> jwt.PyJWKClient:
    return jwt.PyJWKClient(jwks_url)


def _decode_options() -> dict[str, Any]:
    return {
        "require": ["sub", "exp"],
        "verify_aud": bool(settings.AUTH_AUDIENCE),
    }


def decode_identity_token(token: str) -> dict[str, Any]:
    """
    Verify `token` and return its claims.
    """
    raw = (token or "").strip()
    if not raw:
        raise IdentityError("Identity token is empty.")

    if settings.AUTH_JWKS_URL:
        try:
            key = _jwks_client(settings.AUTH_JWKS_URL).get_signing_key_from_jwt(raw).key
        except (jwt.PyJWKClientError, jwt.InvalidTokenError) as exc:
            raise IdentityError("Unable to resolve signing key.") from exc
        algorithms = ASYMMETRIC_ALGORITHMS
    elif settings.AUTH_JWT_SECRET:
        key = settings.AUTH_JWT_SECRET
        algorithms = [settings.AUTH_JWT_ALGORITHM]
    else:
        raise IdentityError("No identity verification key is configured.")

    try:
        claims = jwt.decode(
            raw,
            key,
            algorithms=algorithms,
            audience=settings.AUTH_AUDIENCE or None,
            issuer=settings.AUTH_ISSUER or None,
            options=_decode_options(),
        )
    except jwt.InvalidTokenError as exc:
        raise IdentityError("Invalid identity token.") from exc

    if not str(claims.get("sub") or "").strip():
        raise IdentityError("Identity token has no subject.")
    return claims


def claims_to_user_data(claims: dict[str, Any]) -> dict[str, Any]:
    """
    Map provider claims onto `users` columns. Only claims that are present
    are returned, so an upsert never blanks a field the token did not carry.
    """
    user_data: dict[str, Any] = {"id": str(claims["sub"])}
    for claim in ("email", "first_name", "last_name", "profile_image_url"):
        if claim in claims:
            user_data[claim] = claims[claim]
    return user_data
