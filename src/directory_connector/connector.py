from typing import Any

from directory_connector.components import BaseDirectory, DirectoryRecord, LdapDirectory


class DirectoryConnector:
    """High-level interface for looking people up in a directory.

    Wraps any :class:`~directory_connector.components.BaseDirectory`
    implementation. The default backend is
    :class:`~directory_connector.components.LdapDirectory`; options that
    only one backend understands (``base_dn``, ``label`` ...) are passed
    through untouched.

    Example  using as a context manager::

        connector = DirectoryConnector(
            uri="ldaps://dc.corp.example:636",
            username="svc-orgchart",
            password="secret",
            base_dn="DC=corp,DC=example",
            domain="corp.example",
        )
        with connector:
            records = connector.search("jdoe", ["sAMAccountName"], ["displayName"])
    """

    def __init__(
        self,
        uri: str,
        username: str,
        password: str,
        backend: type[BaseDirectory] = LdapDirectory,
        timeout: float | None = None,
        **options: Any,
    ) -> None:
        """Initialise the connector.

        Args:
            uri:      Connection URI for the directory.
            username: Bind username.
            password: Bind password.
            backend:  A :class:`BaseDirectory` subclass to use as the driver.
                      Defaults to :class:`LdapDirectory`.
            timeout:  Lookup timeout in seconds, handed to the backend.
            options:  Backend-specific keyword arguments.
        """
        self._directory: BaseDirectory = backend(
            uri=uri, username=username, password=password, timeout=timeout, **options
        )

    # ------------------------------------------------------------------
    # Connection lifecycle (delegates to the backend)
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """Open the directory connection."""
        self._directory.connect()

    def disconnect(self) -> None:
        """Close the directory connection."""
        self._directory.disconnect()

    @property
    def is_connected(self) -> bool:
        """Return True when the underlying connection is active."""
        return self._directory.is_connected

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def search(
        self,
        identifier: str,
        search_fields: list[str],
        attributes: list[str],
    ) -> list[DirectoryRecord]:
        """Return every record matching *identifier* on any of *search_fields*."""
        return self._directory.search(identifier, search_fields, attributes)

    def ping(self) -> None:
        """Raise if the directory does not answer a trivial request."""
        self._directory.ping()

    # ------------------------------------------------------------------
    # Context manager support
    # ------------------------------------------------------------------

    def __enter__(self) -> "DirectoryConnector":
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.disconnect()
