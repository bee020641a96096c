"""HS256 access tokens (PyJWT).

Tokens carry the user's identity (``userId``, ``firstName``, ``lastName``)
and expire after ``ACCESS_TOKEN_TTL_MINUTES``. Refreshing re-issues a token
with the same identity and a fresh expiry.
"""

from datetime import timedelta
from typing import Any, Dict, Optional

import jwt
from jwt.exceptions import InvalidTokenError

from domain.shared.clock import utc_now
from infrastructure.config import get_access_token_secret, get_access_token_ttl_minutes

ALGORITHM = "HS256"
IDENTITY_CLAIMS = ("userId", "firstName", "lastName")


class TokenService:
    """
    Issue, check and refresh access tokens.

    Examples:
        >>> tokens = TokenService(secret="s3cret")
        >>> token = tokens.create_token("Ada", "Lovelace", "u-1")["accessToken"]
        >>> tokens.is_expired(token)
        False
    """

    def __init__(self, secret: Optional[str] = None, ttl_minutes: Optional[int] = None):
        self._secret = secret or get_access_token_secret()
        self._ttl = timedelta(
            minutes=ttl_minutes if ttl_minutes is not None else get_access_token_ttl_minutes()
        )

    def _encode(self, claims: Dict[str, Any]) -> str:
        now = utc_now()
        payload = dict(claims, iat=now, exp=now + self._ttl)
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def create_token(self, first_name: str, last_name: str, user_id: str) -> Dict[str, str]:
        token = self._encode({"userId": user_id, "firstName": first_name, "lastName": last_name})
        return {"accessToken": token}

    def decode(self, token: str) -> Dict[str, Any]:
        """Raises jwt InvalidTokenError (incl. ExpiredSignatureError)."""
        return jwt.decode(token, self._secret, algorithms=[ALGORITHM])

    def is_expired(self, token: Optional[str]) -> bool:
        """True for expired, tampered, malformed or missing tokens."""
        if not token:
            return True
        try:
            self.decode(token)
        except InvalidTokenError:
            return True
        return False

    def refresh(self, token: str) -> str:
        claims = self.decode(token)
        return self._encode({key: claims.get(key) for key in IDENTITY_CLAIMS})
