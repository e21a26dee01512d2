from .base_directory import BaseDirectory, DirectoryConnectionError
from .ldap_directory import LdapDirectory
from .neo4j_directory import Neo4jDirectory
from .record import DirectoryRecord

__all__ = [
    "BaseDirectory",
    "DirectoryConnectionError",
    "DirectoryRecord",
    "LdapDirectory",
    "Neo4jDirectory",
]
