"""Data models for a realized apiDoc description.

The loader turns ``api_data.js`` / ``api_data.json`` into these models
before the converter walks them. Keys apiDoc emits that the converter
does not use (filename, groupTitle, ...) are ignored.
"""

from pydantic import BaseModel


class FieldDeclaration(BaseModel):
    """A single documented field (parameter, header, or response field)."""

    field: str
    type: str | None = None  # free-form annotation, e.g. "String[]" or "Number|null"
    optional: bool = False
    description: str | None = None  # may contain HTML


class ExampleBlock(BaseModel):
    """A free-text example, usually an HTTP status line followed by a body."""

    title: str = ""
    content: str = ""
    type: str = "json"


class FieldSection(BaseModel):
    """Field groups plus examples for one of parameter/header/success/error."""

    fields: dict[str, list[FieldDeclaration]] = {}  # {group label: fields}
    examples: list[ExampleBlock] = []


class ApiEntry(BaseModel):
    """One documented HTTP operation."""

    type: str | None = None  # HTTP method
    url: str | None = None  # /users/:id
    group: str | None = None
    title: str | None = None
    name: str | None = None
    description: str | None = None
    version: str | None = None
    parameter: FieldSection | None = None
    header: FieldSection | None = None
    success: FieldSection | None = None
    error: FieldSection | None = None


class ApiDescription(BaseModel):
    """The object passed to apiDoc's ``define()`` registration call."""

    api: list[ApiEntry]
