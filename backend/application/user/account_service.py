"""Account service: registration, login and profile update.

Responses keep the ``{"error": ...}`` envelope the web client expects;
business outcomes (duplicate account, bad credentials, stale token) are
reported in that field rather than raised.
"""

from typing import Any, Dict
import logging

from domain.shared.ports.user_repository import IUserRepository
from domain.user.core.entities.user import User
from infrastructure.auth.passwords import hash_password, verify_password
from infrastructure.auth.tokens import TokenService

logger = logging.getLogger(__name__)

ACCOUNT_EXISTS = "Account Already Exists"
BAD_CREDENTIALS = "Login/Password incorrect"
TOKEN_INVALID = "The JWT is no longer valid"


class AccountService:
    """Handles the Users collection and access tokens."""

    def __init__(self, users: IUserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    async def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        login: str,
        password: str,
    ) -> str:
        """
        Returns:
            "" on success, otherwise the error message
        """
        existing = await self._users.find_by_login_or_email(login, email)
        if existing:
            logger.info("Registration rejected", extra={"login": login})
            return ACCOUNT_EXISTS

        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            login=login,
            password_hash=hash_password(password),
        )
        await self._users.add(user)

        logger.info("User registered", extra={"user_id": user.id})
        return ""

    async def login(self, login: str, password: str) -> Dict[str, Any]:
        user = await self._users.find_by_login(login)
        if user is None or not verify_password(password, user.password_hash):
            return {"error": BAD_CREDENTIALS}

        logger.info("User logged in", extra={"user_id": user.id})
        return self._tokens.create_token(user.first_name, user.last_name, user.id)

    async def update_account(
        self,
        user_id: str,
        first_name: str,
        last_name: str,
        email: str,
        login: str,
        jwt_token: str,
    ) -> Dict[str, Any]:
        if self._tokens.is_expired(jwt_token):
            return {"error": TOKEN_INVALID, "userJwt": ""}

        matched = await self._users.update(
            user_id,
            {"email": email, "login": login, "firstName": first_name, "lastName": last_name},
        )
        error = "" if matched else "User not found"

        logger.info("Account updated", extra={"user_id": user_id, "matched": matched})
        return {"error": error, "userJwt": self._tokens.refresh(jwt_token)}
