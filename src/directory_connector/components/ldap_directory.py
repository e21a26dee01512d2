import logging
import ssl

from ldap3 import NONE, SUBTREE, Connection, Server, Tls
from ldap3.core.exceptions import LDAPException
from ldap3.utils.conv import escape_filter_chars

from .base_directory import BaseDirectory, DirectoryConnectionError
from .record import DirectoryRecord, as_values

logger = logging.getLogger(__name__)

PERSON_FILTER = "(&(objectClass=user)(objectCategory=person)(|{clauses}))"


def build_person_filter(identifier: str, search_fields: list[str]) -> str:
    """Return the LDAP filter matching a person on any of *search_fields*."""
    value = escape_filter_chars(identifier)
    clauses = "".join(f"({field}={value})" for field in search_fields)
    return PERSON_FILTER.format(clauses=clauses)


class LdapDirectory(BaseDirectory):
    """Active Directory / LDAP implementation of :class:`BaseDirectory`.

    Binds as ``username@domain`` over TLS using ``ldap3`` and searches the
    whole subtree below ``base_dn`` for person entries.

    Example::

        directory = LdapDirectory(
            uri="ldaps://dc.corp.example:636",
            username="svc-orgchart",
            password="secret",
            base_dn="DC=corp,DC=example",
            domain="corp.example",
        )
        with directory:
            records = directory.search("jdoe", ["sAMAccountName"], ["displayName"])
    """

    def __init__(
        self,
        uri: str,
        username: str,
        password: str,
        timeout: float | None = None,
        base_dn: str = "",
        domain: str = "",
        verify_tls: bool = True,
    ) -> None:
        super().__init__(uri, username, password, timeout)
        self._base_dn = base_dn
        self._domain = domain
        self._verify_tls = verify_tls
        self._connection: Connection | None = None

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """Bind to the directory server."""
        if self._connected:
            return
        if not self._username:
            raise DirectoryConnectionError("missing bind username")
        if not self._password:
            raise DirectoryConnectionError(f"password required for {self._username}")

        bind_user = f"{self._username}@{self._domain}" if self._domain else self._username
        logger.debug("trying to bind as %s", bind_user)

        tls = Tls(validate=ssl.CERT_REQUIRED if self._verify_tls else ssl.CERT_NONE)
        try:
            server = Server(self._uri, tls=tls, get_info=NONE, connect_timeout=self._timeout)
            self._connection = Connection(
                server,
                user=bind_user,
                password=self._password,
                auto_bind=True,
                receive_timeout=self._timeout,
            )
        except LDAPException as exc:
            raise DirectoryConnectionError(f"bind as {bind_user} failed: {exc}") from exc

        logger.debug("bind successful")
        self._connected = True

    def disconnect(self) -> None:
        """Unbind and release the connection."""
        if self._connection is not None:
            self._connection.unbind()
            self._connection = None
        self._connected = False

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def search(
        self,
        identifier: str,
        search_fields: list[str],
        attributes: list[str],
    ) -> list[DirectoryRecord]:
        """Search the subtree for person entries matching *identifier*.

        Raises:
            RuntimeError:              If called before :meth:`connect`.
            DirectoryConnectionError:  If the server rejects the search.
        """
        self._assert_connected()
        query = build_person_filter(identifier, search_fields)
        logger.debug("searching %s with %s", self._base_dn, query)

        try:
            ok = self._connection.search(  # type: ignore[union-attr]
                search_base=self._base_dn,
                search_filter=query,
                search_scope=SUBTREE,
                attributes=attributes,
            )
        except LDAPException as exc:
            raise DirectoryConnectionError(f"search for {identifier} failed: {exc}") from exc

        # ldap3 returns False both for a failed search and for a successful
        # one without entries; only the result code tells them apart.
        result = self._connection.result or {}  # type: ignore[union-attr]
        if not ok and result.get("result", 0) != 0:
            raise DirectoryConnectionError(
                f"search for {identifier} failed: {result.get('description')}"
                f" {result.get('message') or ''}".rstrip()
            )

        return [
            self._entry_to_record(entry)
            for entry in self._connection.response or []  # type: ignore[union-attr]
            if entry.get("type") == "searchResEntry"
        ]

    def ping(self) -> None:
        self._assert_connected()
        try:
            identity = self._connection.extend.standard.who_am_i()  # type: ignore[union-attr]
        except LDAPException as exc:
            raise DirectoryConnectionError(f"who am i failed: {exc}") from exc
        if identity is None:
            result = self._connection.result or {}  # type: ignore[union-attr]
            raise DirectoryConnectionError(f"who am i failed: {result.get('description')}")

    def _assert_connected(self) -> None:
        if not self._connected or self._connection is None:
            raise RuntimeError("Not connected. Call connect() or use the context manager first.")

    @staticmethod
    def _entry_to_record(entry: dict) -> DirectoryRecord:
        """Convert an ldap3 response entry to a :class:`DirectoryRecord`."""
        attributes = {
            name: as_values(value)
            for name, value in (entry.get("attributes") or {}).items()
        }
        raw_attributes = {
            name: [item for item in values if isinstance(item, bytes)]
            for name, values in (entry.get("raw_attributes") or {}).items()
        }
        return DirectoryRecord(
            dn=entry.get("dn", ""),
            attributes=attributes,
            raw_attributes=raw_attributes,
        )
