from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from directory_connector import BACKENDS, DirectoryConnector
from tree_builder import BuildConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Directory
    directory_backend: Literal["ldap", "neo4j"] = "ldap"
    directory_uri: str = "ldaps://localhost:636"
    directory_username: str = ""
    directory_password: str = ""
    directory_timeout: float | None = None

    # LDAP / Active Directory
    ldap_base_dn: str = ""
    ldap_domain: str = ""
    ldap_verify_tls: bool = True

    # Neo4j
    neo4j_label: str = "Person"
    neo4j_relationship: str = "REPORTS_TO"

    # Search limits, both must be raised above 0 before a build runs
    search_depth: int = 0
    max_users: int = 0

    # Attribute mapping
    search_field_name: str = "sAMAccountName"
    search_field_alt_names: List[str] = Field(default_factory=list)
    search_display_name: str = "displayName"
    search_field_title: str = "title"
    search_field_direct_reports: str = "directReports"
    search_field_image: str = ""
    images_dir: str = "images"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    def build_config(self, **overrides: object) -> BuildConfig:
        """Return the tree build configuration, with *overrides* applied."""
        values = {
            "max_depth": self.search_depth,
            "max_total_nodes": self.max_users,
            "key_field": self.search_field_name,
            "alt_key_fields": self.search_field_alt_names,
            "display_name_field": self.search_display_name,
            "title_field": self.search_field_title,
            "direct_reports_field": self.search_field_direct_reports,
            "image_field": self.search_field_image,
            "images_dir": self.images_dir,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return BuildConfig(**values)

    def create_connector(self) -> DirectoryConnector:
        """Return an unconnected connector for the configured backend."""
        if self.directory_backend == "neo4j":
            options = {
                "label": self.neo4j_label,
                "relationship": self.neo4j_relationship,
                "key_property": self.search_field_name,
                "reports_attribute": self.search_field_direct_reports,
            }
        else:
            options = {
                "base_dn": self.ldap_base_dn,
                "domain": self.ldap_domain,
                "verify_tls": self.ldap_verify_tls,
            }
        return DirectoryConnector(
            uri=self.directory_uri,
            username=self.directory_username,
            password=self.directory_password,
            backend=BACKENDS[self.directory_backend],
            timeout=self.directory_timeout,
            **options,
        )


settings = Settings()
