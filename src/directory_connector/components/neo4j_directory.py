from typing import Any

from neo4j import Driver, GraphDatabase
from neo4j.exceptions import Neo4jError, ServiceUnavailable

from .base_directory import BaseDirectory, DirectoryConnectionError
from .record import DirectoryRecord, as_values

PERSON_QUERY = (
    "MATCH (p:{label}) "
    "WHERE any(field IN $fields WHERE p[field] = $identifier) "
    "OPTIONAL MATCH (r:{label})-[:{relationship}]->(p) "
    "RETURN p, collect(r[$key]) AS reports"
)


class Neo4jDirectory(BaseDirectory):
    """Neo4j implementation of :class:`BaseDirectory`.

    People are ``(:Person)`` nodes whose properties carry the directory
    attributes; a ``(report)-[:REPORTS_TO]->(manager)`` relationship models
    each reporting line. The keys of a node's reports are exposed under
    ``reports_attribute`` so the tree builder can treat them like LDAP
    ``directReports`` values.

    Example::

        directory = Neo4jDirectory(uri="bolt://localhost:7687", username="neo4j", password="secret")
        with directory:
            records = directory.search("jdoe", ["sAMAccountName"], ["displayName"])
    """

    def __init__(
        self,
        uri: str,
        username: str,
        password: str,
        timeout: float | None = None,
        label: str = "Person",
        relationship: str = "REPORTS_TO",
        key_property: str = "sAMAccountName",
        reports_attribute: str = "directReports",
    ) -> None:
        super().__init__(uri, username, password, timeout)
        self._label = label
        self._relationship = relationship
        self._key_property = key_property
        self._reports_attribute = reports_attribute
        self._driver: Driver | None = None

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """Open the Neo4j driver and verify connectivity."""
        if self._connected:
            return
        options: dict[str, Any] = {}
        if self._timeout is not None:
            options["connection_timeout"] = self._timeout
        self._driver = GraphDatabase.driver(
            self._uri, auth=(self._username, self._password), **options
        )
        try:
            self._driver.verify_connectivity()
        except (Neo4jError, ServiceUnavailable) as exc:
            self._driver.close()
            self._driver = None
            raise DirectoryConnectionError(f"cannot reach {self._uri}: {exc}") from exc
        self._connected = True

    def disconnect(self) -> None:
        """Close the Neo4j driver and release resources."""
        if self._driver is not None:
            self._driver.close()
            self._driver = None
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
        """Return every person node whose *search_fields* equal *identifier*.

        Raises:
            RuntimeError: If called before :meth:`connect`.
        """
        self._assert_connected()
        cypher = PERSON_QUERY.format(label=self._label, relationship=self._relationship)
        rows = self._run(
            cypher,
            {"fields": search_fields, "identifier": identifier, "key": self._key_property},
        )
        return [self._row_to_record(row["p"], row["reports"], attributes) for row in rows]

    def ping(self) -> None:
        self._assert_connected()
        self._run("RETURN 1", {})

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _assert_connected(self) -> None:
        if not self._connected or self._driver is None:
            raise RuntimeError(
                "Not connected. Call connect() or use the context manager first."
            )

    def _run(self, cypher: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Execute *cypher* inside a fresh session and return all records."""
        results: list[dict[str, Any]] = []
        with self._driver.session() as session:  # type: ignore[union-attr]
            result = session.run(cypher, **params)
            for record in result:
                results.append({key: record[key] for key in record.keys()})
        return results

    def _row_to_record(
        self, node: Any, reports: list[Any], attributes: list[str]
    ) -> DirectoryRecord:
        """Convert a Neo4j person node and its report keys into a record."""
        properties = dict(node._properties)
        text: dict[str, list[str]] = {}
        raw: dict[str, list[bytes]] = {}
        for name in attributes:
            value = properties.get(name)
            if isinstance(value, (bytes, bytearray)):
                raw[name] = [bytes(value)]
            else:
                text[name] = as_values(value)
        text[self._reports_attribute] = as_values(reports)
        return DirectoryRecord(dn=node.element_id, attributes=text, raw_attributes=raw)
