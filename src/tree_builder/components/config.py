from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from tree_builder.errors import ConfigurationError


class BuildConfig(BaseModel):
    """Search limits and the directory attributes a tree build reads.

    ``max_depth`` and ``max_total_nodes`` default to zero on purpose: a build
    refuses to start until the caller chooses both limits.
    """

    max_depth: int = 0
    max_total_nodes: int = 0

    key_field: str = "sAMAccountName"
    alt_key_fields: List[str] = Field(default_factory=list)
    display_name_field: str = "displayName"
    title_field: str = "title"
    direct_reports_field: str = "directReports"
    image_field: str = ""

    images_dir: str = "images"

    @property
    def search_fields(self) -> list[str]:
        """Attributes an identifier is matched against."""
        return [*self.alt_key_fields, self.key_field]

    @property
    def attributes(self) -> list[str]:
        """Attributes requested for every matched record."""
        fields = [
            self.key_field,
            self.title_field,
            self.direct_reports_field,
            self.display_name_field,
        ]
        if self.image_field:
            fields.append(self.image_field)
        return fields

    def validate_limits(self) -> None:
        """Raise :class:`ConfigurationError` for any unset limit or mapping."""
        if self.max_total_nodes < 1:
            raise ConfigurationError("max_total_nodes cannot be left at 0")
        if self.max_depth < 1:
            raise ConfigurationError("max_depth cannot be left at 0")

        for name in ("display_name_field", "key_field", "title_field", "direct_reports_field"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} cannot be left empty")
