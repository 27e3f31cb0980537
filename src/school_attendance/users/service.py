from __future__ import annotations

import logging
from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import FieldErrors, require_email, require_min_length, require_string
from ..core.constants import MIN_PASSWORD_LENGTH, NAME_MAX_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateRecordError, ValidationError
from .model import Principal, User
from .repository import TokenRepository, UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate users and track the tokens issued to them."""

    def __init__(self, users: UserRepository, tokens: TokenRepository):
        self._users = users
        self._tokens = tokens

    def authenticate(self, email: str, password: str) -> User:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError("Unauthorized")

        user = self._users.get_by_email(email.strip().lower())
        if not user:
            raise AuthenticationError("Unauthorized")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.info("Failed login for %s", email)
            raise AuthenticationError("Unauthorized")
        return user

    def remember_token(self, *, jti: str, user_id: int) -> None:
        self._tokens.store(jti=jti, user_id=user_id)

    def is_token_revoked(self, jti: str) -> bool:
        return not self._tokens.is_active(jti)

    def logout(self, principal: Principal) -> int:
        revoked = self._tokens.revoke_all_for_user(principal.user_id)
        logger.info("User %s logged out (%d tokens revoked)", principal.user_id, revoked)
        return revoked


class UserService:
    """Use case: manage teacher accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register_teacher(self, payload: dict) -> User:
        errors = FieldErrors()
        data = payload if isinstance(payload, dict) else {}
        name = require_string(errors, data, "name", max_length=NAME_MAX_LENGTH)
        email = require_email(errors, data)
        password = require_min_length(errors, data, "password", MIN_PASSWORD_LENGTH)

        if email and self._users.get_by_email(email):
            errors.add("email", "The email has already been taken.")
        if errors:
            raise ValidationError("The given data was invalid.", errors.as_dict())

        try:
            teacher = self._users.create_user(
                name=name,
                email=email,
                password_hash=generate_password_hash(password),
                role=Role.TEACHER,
            )
        except DuplicateRecordError:
            raise ValidationError("The given data was invalid.", {"email": ["The email has already been taken."]})

        logger.info("Registered teacher %s <%s>", teacher.user_id, teacher.email)
        return teacher

    def list_teachers(self) -> Sequence[User]:
        return self._users.list_by_role(Role.TEACHER)
