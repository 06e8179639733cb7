"""Application service: Update User use case."""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import EntityNotFoundError, ValidationError
from retail_oms.domain.model.user import User
from retail_oms.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class UpdateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        username: str | None = None,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        """Edit a user; omitted or blank fields are kept."""
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User not found with id: {user_id}")

        if username and username.strip():
            other = self._user_repo.get_by_username(username.strip())
            if other is not None and other.id != user.id:
                raise ValidationError(f"Username already exists: {username.strip()}")
        if email and email.strip():
            other = self._user_repo.get_by_email(email.strip())
            if other is not None and other.id != user.id:
                raise ValidationError(f"Email already exists: {email.strip()}")

        user.update_details(
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        self._user_repo.save(user)
        logger.info("User updated", user_id=user.id, username=user.username)
        return user
