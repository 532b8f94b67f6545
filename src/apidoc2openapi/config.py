"""Document defaults and ``info`` overrides."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from apidoc2openapi.parser.apidoc import ConfigurationError

OPENAPI_VERSION = "3.0.3"
DEFAULT_TITLE = "API (converted from apiDoc)"
DEFAULT_DESCRIPTION = "This specification is automatically converted from apiDoc (api_data.js)."
DEFAULT_VERSION = "1.0.0"

# Methods whose non-path parameters travel in a JSON request body
BODY_METHODS = frozenset({"post", "put", "patch"})


class DocumentInfo(BaseModel):
    """Overrides for the generated document's ``info`` object.

    Extra keys (contact, license, termsOfService, ...) pass through as-is.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    version: str | None = None
    description: str | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value):
        # YAML reads `version: 2.0` as a float
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def as_overrides(self) -> dict:
        """Return only the keys that were actually set."""
        return self.model_dump(exclude_none=True)

    def merged(self, other: "DocumentInfo") -> "DocumentInfo":
        """Return a copy with ``other``'s set keys taking precedence."""
        return DocumentInfo.model_validate({**self.as_overrides(), **other.as_overrides()})


def load_info_file(file_path: Path) -> DocumentInfo:
    """Load ``info`` overrides from a YAML or JSON file."""
    try:
        data = yaml.safe_load(Path(file_path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read info file {file_path}: {e}") from e

    if data is None:
        return DocumentInfo()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Info file {file_path} must contain a mapping")

    try:
        return DocumentInfo.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid info file {file_path}: {e}") from e
