"""Access tokens for the command API.

The subject claim is the user id; the permission claim is informational
only (the directory is re-read on every request).
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from casetrack.core.config import get_settings
from casetrack.shared.utils.datetime import utc_now


def create_access_token(
    user_id: int,
    permission: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT for user_id.

    Args:
        user_id: Directory id, stored as the sub claim.
        permission: Permission value at issue time.
        expires_delta: Optional TTL; else settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": str(user_id),
        "permission": permission,
        "exp": utc_now() + ttl,
    }
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry and return the claims.

    Raises:
        ValueError: If the token is invalid, expired, or has no usable sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not str(payload.get("sub", "")).isdigit():
        raise ValueError("Token subject is not a user id")
    return payload
