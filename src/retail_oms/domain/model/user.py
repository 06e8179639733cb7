"""User entity.

Orders reference users by id; the order code never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from retail_oms.domain.exceptions import ValidationError


@dataclass
class User:

    id: str
    username: str
    email: str
    first_name: str = ""
    last_name: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        id: str,
        username: str,
        email: str,
        first_name: str = "",
        last_name: str = "",
    ) -> User:
        if not username or not username.strip():
            raise ValidationError("Username cannot be blank")
        if not email or not email.strip():
            raise ValidationError("Email cannot be blank")
        if "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(
            id=id,
            username=username.strip(),
            email=email.strip(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def update_details(
        self,
        username: str | None = None,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> None:
        """Overwrite the non-blank fields given; uniqueness is checked by the caller."""
        if email and email.strip():
            if "@" not in email:
                raise ValidationError(f"Invalid email address: {email!r}")
            self.email = email.strip()
        if username and username.strip():
            self.username = username.strip()
        if first_name and first_name.strip():
            self.first_name = first_name.strip()
        if last_name and last_name.strip():
            self.last_name = last_name.strip()
