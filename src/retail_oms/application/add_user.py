"""Application service: Add User use case."""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import ValidationError
from retail_oms.domain.model.user import User
from retail_oms.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class AddUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        username: str,
        email: str,
        first_name: str = "",
        last_name: str = "",
    ) -> User:
        user = User.create(
            id=self._user_repo.next_id(),
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )

        if self._user_repo.get_by_username(user.username) is not None:
            raise ValidationError(f"Username already exists: {user.username}")
        if self._user_repo.get_by_email(user.email) is not None:
            raise ValidationError(f"Email already exists: {user.email}")

        self._user_repo.save(user)
        logger.info("User added", user_id=user.id, username=user.username)
        return user
