"""User directory and lookup catalogs (tribunals, phases, statuses).

Both enforce name/email uniqueness compared trimmed and case-insensitively.
Mutations are admin-only; the check happens at the API layer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from casetrack.domain.entities import LookupEntity, UserEntity
from casetrack.domain.enums import Permission
from casetrack.domain.exceptions import (
    DuplicateEmailException,
    DuplicateNameException,
    ResourceNotFoundException,
    ValidationException,
)
from casetrack.shared.utils.text import name_key

logger = logging.getLogger(__name__)

PasswordHasher = Callable[[str], str]
PasswordVerifier = Callable[[str, str], bool]


class UserDirectory:
    """Registered users. Ids are monotonic for the lifetime of the directory."""

    def __init__(
        self,
        users: Iterable[UserEntity] = (),
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self._users: list[UserEntity] = list(users)
        self._last_id = max((u.id for u in self._users), default=0)
        self._hash = password_hasher

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> list[UserEntity]:
        return list(self._users)

    def get(self, user_id: int) -> UserEntity:
        """Return user by id; raise ResourceNotFoundException if missing."""
        for user in self._users:
            if user.id == user_id:
                return user
        raise ResourceNotFoundException("user", user_id)

    def find_by_name(self, name: str | None) -> UserEntity | None:
        """Exact name match (how cases reference their assignee)."""
        if not name:
            return None
        return next((u for u in self._users if u.name == name), None)

    def find_by_name_loose(self, name: str | None) -> UserEntity | None:
        """Trimmed, case-insensitive name match (used for imported rows)."""
        key = name_key(name)
        if not key:
            return None
        return next((u for u in self._users if name_key(u.name) == key), None)

    def find_by_email(self, email: str | None) -> UserEntity | None:
        key = name_key(email)
        if not key:
            return None
        return next((u for u in self._users if u.email_key == key), None)

    def email_for(self, name: str | None) -> str:
        """Email of the user with this exact name, or '' if unknown."""
        user = self.find_by_name(name)
        return user.email if user else ""

    def _ensure_email_free(self, email: str, exclude_id: int | None = None) -> None:
        key = name_key(email)
        for user in self._users:
            if user.email_key == key and user.id != exclude_id:
                raise DuplicateEmailException(email.strip())

    def _ensure_name_free(self, name: str, exclude_id: int | None = None) -> None:
        key = name_key(name)
        for user in self._users:
            if name_key(user.name) == key and user.id != exclude_id:
                raise DuplicateNameException("user", name.strip())

    def _hash_password(self, password: str | None) -> str | None:
        if not password:
            return None
        if self._hash is None:
            raise ValidationException("Password hashing is not configured", field="password")
        return self._hash(password)

    def add_user(
        self,
        name: str,
        email: str,
        permission: Permission = Permission.STANDARD,
        password: str | None = None,
    ) -> UserEntity:
        """Register a user.

        Raises:
            DuplicateEmailException: the email is taken.
            DuplicateNameException: another user has the same name.
        """
        self._ensure_email_free(email)
        self._ensure_name_free(name)
        user = UserEntity(
            id=self._last_id + 1,
            name=name.strip(),
            email=email.strip(),
            permission=permission,
            password_hash=self._hash_password(password),
        )
        self._last_id = user.id
        self._users.append(user)
        logger.info("User %s registered (%s)", user.id, user.permission.value)
        return user

    def update_user(
        self,
        user_id: int,
        name: str,
        email: str,
        permission: Permission,
        password: str | None = None,
    ) -> UserEntity:
        """Replace a user's profile. Password is kept when not supplied.

        Renaming a user does not rewrite cases or log entries that carry the old name.
        """
        current = self.get(user_id)
        self._ensure_email_free(email, exclude_id=user_id)
        self._ensure_name_free(name, exclude_id=user_id)
        updated = UserEntity(
            id=current.id,
            name=name.strip(),
            email=email.strip(),
            permission=permission,
            password_hash=self._hash_password(password) or current.password_hash,
            extra=current.extra,
        )
        self._users = [updated if u.id == user_id else u for u in self._users]
        return updated

    def delete_user(self, user_id: int) -> None:
        self.get(user_id)
        self._users = [u for u in self._users if u.id != user_id]

    def authenticate(
        self, email: str, password: str, verify: PasswordVerifier
    ) -> UserEntity | None:
        """Return the user if email and password match; None otherwise."""
        user = self.find_by_email(email)
        if user is None or not user.password_hash:
            return None
        return user if verify(password, user.password_hash) else None


class LookupCatalog:
    """A sorted list of unique names (one instance per tribunal/phase/status)."""

    def __init__(self, kind: str, items: Iterable[LookupEntity] = ()) -> None:
        self.kind = kind
        self._items: list[LookupEntity] = list(items)
        self._last_id = max((i.id for i in self._items), default=0)
        self._sort()

    def _sort(self) -> None:
        self._items.sort(key=lambda item: item.name_key)

    def list_items(self) -> list[LookupEntity]:
        return list(self._items)

    def names(self) -> list[str]:
        return [item.name for item in self._items]

    def get(self, item_id: int) -> LookupEntity:
        for item in self._items:
            if item.id == item_id:
                return item
        raise ResourceNotFoundException(self.kind, item_id)

    def _ensure_name_free(self, name: str, exclude_id: int | None = None) -> None:
        key = name_key(name)
        if any(i.name_key == key and i.id != exclude_id for i in self._items):
            raise DuplicateNameException(self.kind, name.strip())

    def add(self, name: str) -> LookupEntity:
        self._ensure_name_free(name)
        item = LookupEntity(id=self._last_id + 1, name=name.strip())
        self._last_id = item.id
        self._items.append(item)
        self._sort()
        return item

    def rename(self, item_id: int, name: str) -> LookupEntity:
        """Rename in place. Cases keep the old name string (no cascade)."""
        self.get(item_id)
        self._ensure_name_free(name, exclude_id=item_id)
        renamed = LookupEntity(id=item_id, name=name.strip())
        self._items = [renamed if i.id == item_id else i for i in self._items]
        self._sort()
        return renamed

    def delete(self, item_id: int) -> None:
        self.get(item_id)
        self._items = [i for i in self._items if i.id != item_id]
