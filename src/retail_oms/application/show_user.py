"""Application service: Show User use case (query)."""

from __future__ import annotations

from retail_oms.domain.exceptions import EntityNotFoundError
from retail_oms.domain.model.user import User
from retail_oms.domain.repository.user_repository import UserRepository


class ShowUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def by_id(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User not found with id: {user_id}")
        return user

    def by_username(self, username: str) -> User:
        user = self._user_repo.get_by_username(username)
        if user is None:
            raise EntityNotFoundError(f"User not found with username: {username}")
        return user
