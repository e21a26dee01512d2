from abc import ABC, abstractmethod
from typing import Any

from .record import DirectoryRecord


class DirectoryConnectionError(Exception):
    """The directory could not be reached or refused the bind."""


class BaseDirectory(ABC):
    """Abstract base class for all directory lookup backends.

    Subclasses must implement connection lifecycle methods and a
    single-identifier search returning every matching record.
    """

    def __init__(
        self,
        uri: str,
        username: str,
        password: str,
        timeout: float | None = None,
    ) -> None:
        self._uri = uri
        self._username = username
        self._password = password
        self._timeout = timeout
        self._connected: bool = False

    @property
    def is_connected(self) -> bool:
        """Return True if an active connection exists."""
        return self._connected

    @abstractmethod
    def connect(self) -> None:
        """Open a connection to the directory."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Close the active connection to the directory."""
        ...

    @abstractmethod
    def search(
        self,
        identifier: str,
        search_fields: list[str],
        attributes: list[str],
    ) -> list[DirectoryRecord]:
        """Find every record whose *search_fields* match *identifier*.

        Args:
            identifier:    The value to look up (e.g. an account name).
            search_fields: Attributes compared against *identifier*; a record
                           matches when any of them is equal.
            attributes:    Attributes to return for each match.

        Returns:
            Zero, one or many records. Deciding what a count means is left
            to the caller.
        """
        ...

    @abstractmethod
    def ping(self) -> None:
        """Issue a trivial request; raise if the directory does not answer."""
        ...

    def _assert_connected(self) -> None:
        if not self._connected:
            raise RuntimeError(
                "Not connected. Call connect() or use the context manager first."
            )

    def __enter__(self) -> "BaseDirectory":
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.disconnect()
