"""Response objects built from apiDoc success/error sections."""

from apidoc2openapi.converter.examples import parse_example
from apidoc2openapi.converter.text import extract_status_code, strip_html
from apidoc2openapi.converter.typemap import map_type_to_schema
from apidoc2openapi.parser.base import ApiEntry, FieldSection

JSON_MEDIA_TYPE = "application/json"


def build_responses(entry: ApiEntry) -> dict[str, dict]:
    """Build the ``responses`` map of an operation.

    Field groups are applied before examples. A field group's schema
    replaces any earlier schema for its status; only the first example per
    status is kept. An entry that declares nothing still gets a 200.
    """
    responses: dict[str, dict] = {}
    label = entry.title or entry.name
    success_description = strip_html(label or "Success")

    add_responses_from_fields(responses, entry.success, "200", success_description)
    add_responses_from_fields(responses, entry.error, "400", strip_html(label or "Error"))
    add_examples(responses, entry.success, "200", success_description)
    add_examples(responses, entry.error, "400", "Error")

    if not responses:
        responses["200"] = {"description": success_description or "Success"}
    return responses


def ensure_response(responses: dict[str, dict], status: str | None, description: str) -> dict:
    """Get or create the response for ``status``; the first non-empty description sticks."""
    status = status or "200"
    response = responses.get(status)
    if response is None:
        response = responses[status] = {"description": description or ""}
    elif not response["description"] and description:
        response["description"] = description
    return response


def add_responses_from_fields(
    responses: dict[str, dict],
    section: FieldSection | None,
    fallback_status: str,
    description: str,
) -> None:
    if section is None:
        return

    for group_name, fields in section.fields.items():
        status = extract_status_code(group_name, fallback_status)
        properties = {}
        required = []

        for field in fields:
            prop = map_type_to_schema(field.type)
            if field.description:
                prop["description"] = strip_html(field.description)
            properties[field.field] = prop
            if not field.optional:
                required.append(field.field)

        schema = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required

        media = _json_media(ensure_response(responses, status, description))
        media["schema"] = schema


def add_examples(
    responses: dict[str, dict],
    section: FieldSection | None,
    fallback_status: str,
    description: str,
) -> None:
    if section is None:
        return

    for example in section.examples:
        parsed = parse_example(example.content)
        status = parsed.status or extract_status_code(example.title, fallback_status) or fallback_status
        response = ensure_response(responses, status, description)
        if parsed.body is None:
            continue

        media = _json_media(response)
        if "example" not in media:
            media["example"] = parsed.body


def _json_media(response: dict) -> dict:
    return response.setdefault("content", {}).setdefault(JSON_MEDIA_TYPE, {})
