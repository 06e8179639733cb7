"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from retail_oms.domain.model.user import User
from retail_oms.domain.repository.user_repository import UserRepository


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def next_id(self) -> str:
        records = self._load_raw()
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    def get_by_id(self, user_id: str) -> User | None:
        return self._find(lambda raw: raw["id"] == user_id)

    def get_by_username(self, username: str) -> User | None:
        return self._find(lambda raw: raw["username"] == username)

    def get_by_email(self, email: str) -> User | None:
        return self._find(lambda raw: raw["email"].lower() == email.lower())

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, user: User) -> None:
        records = [raw for raw in self._load_raw() if raw["id"] != user.id]
        records.append(self._to_raw(user))
        self._persist_raw(records)

    def delete_by_id(self, user_id: str) -> None:
        self._persist_raw([raw for raw in self._load_raw() if raw["id"] != user_id])

    # --- Serialization --------------------------------------------------------

    def _find(self, predicate) -> User | None:
        for raw in self._load_raw():
            if predicate(raw):
                return self._to_domain(raw)
        return None

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            email=raw["email"],
            first_name=raw.get("first_name", ""),
            last_name=raw.get("last_name", ""),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
