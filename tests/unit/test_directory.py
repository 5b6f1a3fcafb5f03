"""Tests for the user directory and lookup catalogs."""

import pytest

from casetrack.application.services.directory import LookupCatalog, UserDirectory
from casetrack.domain.entities import LookupEntity
from casetrack.domain.enums import Permission
from casetrack.domain.exceptions import (
    DuplicateEmailException,
    DuplicateNameException,
    ResourceNotFoundException,
    ValidationException,
)


def _fake_hash(password: str) -> str:
    return f"hashed:{password}"


def _fake_verify(password: str, password_hash: str) -> bool:
    return password_hash == f"hashed:{password}"


@pytest.fixture
def directory() -> UserDirectory:
    d = UserDirectory(password_hasher=_fake_hash)
    d.add_user("Ana Admin", "ana@firm.test", Permission.ADMIN, "secret")
    d.add_user("Bruno Silva", "bruno@firm.test")
    return d


def test_add_user_assigns_monotonic_ids(directory: UserDirectory) -> None:
    directory.delete_user(2)
    user = directory.add_user("Carla Souza", "carla@firm.test")
    assert user.id == 3


def test_email_is_unique_case_insensitively(directory: UserDirectory) -> None:
    with pytest.raises(DuplicateEmailException):
        directory.add_user("Other", "  ANA@firm.test ")


def test_user_name_is_unique_case_insensitively(directory: UserDirectory) -> None:
    with pytest.raises(DuplicateNameException):
        directory.add_user(" bruno silva ", "other@firm.test")
    with pytest.raises(DuplicateNameException):
        directory.update_user(1, "BRUNO SILVA", "ana@firm.test", Permission.ADMIN)
    assert len(directory) == 2


def test_update_keeps_password_when_omitted(directory: UserDirectory) -> None:
    updated = directory.update_user(1, "Ana Maria", "ana@firm.test", Permission.ADMIN)
    assert updated.name == "Ana Maria"
    assert updated.password_hash == "hashed:secret"


def test_update_cannot_steal_email(directory: UserDirectory) -> None:
    with pytest.raises(DuplicateEmailException):
        directory.update_user(2, "Bruno Silva", "ana@firm.test", Permission.STANDARD)


def test_lookups_by_name(directory: UserDirectory) -> None:
    assert directory.find_by_name("Bruno Silva").id == 2
    assert directory.find_by_name("bruno silva") is None
    assert directory.find_by_name_loose(" bruno silva ").id == 2
    assert directory.email_for("Bruno Silva") == "bruno@firm.test"
    assert directory.email_for("Nobody") == ""


def test_authenticate(directory: UserDirectory) -> None:
    assert directory.authenticate("ANA@firm.test", "secret", _fake_verify).id == 1
    assert directory.authenticate("ana@firm.test", "wrong", _fake_verify) is None
    # No password set
    assert directory.authenticate("bruno@firm.test", "", _fake_verify) is None


def test_password_without_hasher_is_rejected() -> None:
    with pytest.raises(ValidationException):
        UserDirectory().add_user("X", "x@firm.test", password="pw")


def test_get_unknown_user(directory: UserDirectory) -> None:
    with pytest.raises(ResourceNotFoundException):
        directory.get(42)


def test_catalog_is_sorted_and_unique() -> None:
    catalog = LookupCatalog("status", [LookupEntity(id=1, name="Perícia")])
    catalog.add("Aguardando")
    assert catalog.names() == ["Aguardando", "Perícia"]
    with pytest.raises(DuplicateNameException):
        catalog.add(" aguardando ")


def test_catalog_rename_and_delete() -> None:
    catalog = LookupCatalog("phase")
    item = catalog.add("Laudo")
    renamed = catalog.rename(item.id, "Laudo final")
    assert renamed.id == item.id
    assert catalog.names() == ["Laudo final"]
    catalog.delete(item.id)
    assert catalog.names() == []
    with pytest.raises(ResourceNotFoundException):
        catalog.delete(item.id)
