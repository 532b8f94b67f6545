"""Placement of apiDoc parameters and headers into an OpenAPI operation."""

import re
from typing import NamedTuple

from apidoc2openapi.config import BODY_METHODS
from apidoc2openapi.converter.text import strip_html
from apidoc2openapi.converter.typemap import map_type_to_schema
from apidoc2openapi.parser.base import ApiEntry, FieldDeclaration


class ParameterSet(NamedTuple):
    parameters: list[dict] | None  # None when the operation has no parameters
    request_body: dict | None  # None when nothing goes in the body


def classify_parameters(entry: ApiEntry, method: str, raw_path: str, normalized_path: str) -> ParameterSet:
    """Place every parameter field in path, query, or the JSON body, and every header field in header.

    Path placeholders win regardless of method and are always required.
    Other fields go to the query string, except for post/put/patch where
    they become request body properties.
    """
    parameters = []
    body_properties = {}
    body_required = []

    for field in _iter_fields(entry.parameter):
        description = strip_html(field.description)
        schema = map_type_to_schema(field.type)

        if _is_path_param(field.field, raw_path, normalized_path):
            parameters.append(_parameter(field.field, "path", True, schema, description))
        elif method not in BODY_METHODS:
            parameters.append(_parameter(field.field, "query", not field.optional, schema, description))
        else:
            prop = dict(schema)
            if description:
                prop["description"] = description
            body_properties[field.field] = prop
            if not field.optional:
                body_required.append(field.field)

    for field in _iter_fields(entry.header):
        parameters.append(
            _parameter(
                field.field,
                "header",
                not field.optional,
                map_type_to_schema(field.type),
                strip_html(field.description),
            )
        )

    return ParameterSet(
        parameters=parameters or None,
        request_body=_request_body(body_properties, body_required),
    )


def _iter_fields(section) -> list[FieldDeclaration]:
    if section is None:
        return []
    return [field for group in section.fields.values() for field in group]


def _is_path_param(name: str, raw_path: str, normalized_path: str) -> bool:
    if f"{{{name}}}" in normalized_path:
        return True
    return re.search(rf":{re.escape(name)}(?![A-Za-z0-9_])", raw_path) is not None


def _parameter(name: str, location: str, required: bool, schema: dict, description: str) -> dict:
    return {
        "name": name,
        "in": location,
        "required": required,
        "schema": schema,
        "description": description,
    }


def _request_body(properties: dict, required: list[str]) -> dict | None:
    if not properties:
        return None

    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required

    return {
        "required": bool(required),
        "content": {"application/json": {"schema": schema}},
    }
