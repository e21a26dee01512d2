from directory_connector.components import (
    BaseDirectory,
    DirectoryConnectionError,
    DirectoryRecord,
    LdapDirectory,
    Neo4jDirectory,
)
from directory_connector.connector import DirectoryConnector

BACKENDS: dict[str, type[BaseDirectory]] = {
    "ldap": LdapDirectory,
    "neo4j": Neo4jDirectory,
}

__all__ = [
    "BACKENDS",
    "BaseDirectory",
    "DirectoryConnectionError",
    "DirectoryConnector",
    "DirectoryRecord",
    "LdapDirectory",
    "Neo4jDirectory",
]
