from typing import Any

from pydantic import BaseModel, Field


class DirectoryRecord(BaseModel):
    """A single entry returned by a directory search.

    Attribute values are always lists, mirroring LDAP's multi-valued
    attributes; single-valued backends wrap their values on the way in.
    """

    dn: str = ""
    attributes: dict[str, list[str]] = Field(default_factory=dict)
    raw_attributes: dict[str, list[bytes]] = Field(default_factory=dict)

    def get_values(self, name: str) -> list[str]:
        return list(self.attributes.get(name, []))

    def get_value(self, name: str) -> str:
        """Return the first value of *name*, or ``""`` when absent."""
        values = self.attributes.get(name)
        return values[0] if values else ""

    def get_raw_value(self, name: str) -> bytes:
        values = self.raw_attributes.get(name)
        return values[0] if values else b""


def as_values(value: Any) -> list[str]:
    """Coerce a backend attribute value into the list-of-strings form.

    Binary values are dropped; they belong in ``raw_attributes``.
    """
    if value is None or isinstance(value, bytes):
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None and not isinstance(item, bytes)]
    return [str(value)]
