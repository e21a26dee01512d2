"""Shared fixtures.

``FakeDirectory`` stands in for a live LDAP or Neo4j backend: people are
registered by identifier and every search is recorded so tests can assert on
the exact lookups a build performed.
"""
from typing import Any

import pytest

from directory_connector import DirectoryRecord


class FakeDirectory:
    def __init__(self) -> None:
        self.records: dict[str, list[DirectoryRecord]] = {}
        self.calls: list[str] = []
        self.connected = False

    def add(
        self,
        key: str,
        name: str | None = None,
        title: str = "Engineer",
        reports: tuple[str, ...] = (),
        image: bytes = b"",
    ) -> DirectoryRecord:
        attributes = {
            "sAMAccountName": [key],
            "displayName": [name if name is not None else key],
            "title": [title] if title else [],
            "directReports": [f"CN={report},OU=Staff,DC=corp,DC=example" for report in reports],
        }
        raw = {"thumbnailPhoto": [image]} if image else {}
        record = DirectoryRecord(
            dn=f"CN={key},OU=Staff,DC=corp,DC=example",
            attributes=attributes,
            raw_attributes=raw,
        )
        self.records.setdefault(key, []).append(record)
        return record

    def search(
        self, identifier: str, search_fields: list[str], attributes: list[str]
    ) -> list[DirectoryRecord]:
        self.calls.append(identifier)
        return list(self.records.get(identifier, []))

    def ping(self) -> None:
        return None

    def __enter__(self) -> "FakeDirectory":
        self.connected = True
        return self

    def __exit__(self, *exc: Any) -> None:
        self.connected = False


@pytest.fixture()
def fake_directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture()
def small_org(fake_directory: FakeDirectory) -> FakeDirectory:
    """
    ceo  (Alice Chief)
    ├── cto  (Carol Tech)
    │   ├── dev1 (Dan Dev)
    │   └── dev2 (Bea Dev)
    └── cfo  (Bob Money)
    """
    fake_directory.add("ceo", "Alice Chief", "Chief Executive Officer", reports=("cto", "cfo"))
    fake_directory.add("cto", "Carol Tech", "Chief Technology Officer", reports=("dev1", "dev2"))
    fake_directory.add("cfo", "Bob Money", "Chief Financial Officer")
    fake_directory.add("dev1", "Dan Dev", "Developer")
    fake_directory.add("dev2", "Bea Dev", "Developer")
    return fake_directory
