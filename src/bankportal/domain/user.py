"""User domain service."""

import logging
from typing import TYPE_CHECKING, Optional
from bankportal.domain import errors
from bankportal.domain.entities import User as UserEntity
from bankportal.utils.secret_hasher import SecretHasher

if TYPE_CHECKING:
    from bankportal.database.base import Database

logger = logging.getLogger(__name__)


class UserService:
    """Service for registering account holders."""

    def __init__(self, db: "Database", hasher: Optional[SecretHasher] = None):
        self.db = db
        self.hasher = hasher or SecretHasher()

    def register_user(self, name: str, email: str, password: str) -> UserEntity:
        """Register a new user.

        Args:
            name: Display name
            email: Email address, unique across users
            password: Plaintext password, stored only as a digest

        Returns:
            The created user

        Raises:
            ValidationError: If a field is empty
            ConflictError: If the email is already registered
        """
        if not name or not name.strip():
            raise errors.ValidationError("Name cannot be empty")
        if not email or not email.strip():
            raise errors.ValidationError("Email cannot be empty")
        if not password:
            raise errors.ValidationError(errors.PASSWORD_EMPTY)

        email = email.strip().lower()
        if self.db.get_user_by_email(email) is not None:
            raise errors.ConflictError(errors.duplicate_user_email(email))

        user = self.db.create_user(
            name=name.strip(),
            email=email,
            password_digest=self.hasher.encode(password),
        )
        logger.info("Registered user %s", user.id)
        return user

    def get_user(self, user_id: int) -> Optional[UserEntity]:
        return self.db.get_user(user_id)
