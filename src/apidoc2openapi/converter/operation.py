"""OpenAPI operation assembly."""

import logging
import re

from apidoc2openapi.converter.parameters import classify_parameters
from apidoc2openapi.converter.responses import build_responses
from apidoc2openapi.converter.text import strip_html
from apidoc2openapi.parser.base import ApiEntry

logger = logging.getLogger(__name__)

INVALID_ID_CHARS_RE = re.compile(r"[^A-Za-z0-9_]+")
UNDERSCORE_RUN_RE = re.compile(r"_+")


class OperationIdGenerator:
    """Hands out document-unique operationIds for one conversion run.

    The first use of a base name gets it bare; later uses get ``_2``,
    ``_3``, ... in the order they are requested.
    """

    def __init__(self):
        self._counters: dict[str, int] = {}
        self._issued: set[str] = set()

    def next_id(self, base: str | None) -> str:
        name = sanitize_operation_id(base)
        count = self._counters.get(name, 0) + 1
        candidate = name if count == 1 else f"{name}_{count}"

        # A suffixed id can collide with an entry literally named e.g. "get_user_2"
        while candidate in self._issued:
            count += 1
            candidate = f"{name}_{count}"

        self._counters[name] = count
        self._issued.add(candidate)
        if candidate != name:
            logger.debug("Duplicate operationId %r renamed to %r", name, candidate)
        return candidate


def sanitize_operation_id(base: str | None) -> str:
    name = INVALID_ID_CHARS_RE.sub("_", base or "")
    name = UNDERSCORE_RUN_RE.sub("_", name).strip("_")
    return name or "operation"


def build_operation(
    entry: ApiEntry,
    method: str,
    raw_path: str,
    normalized_path: str,
    operation_ids: OperationIdGenerator,
) -> dict:
    """Build the OpenAPI operation object for one apiDoc entry."""
    operation = {}
    if entry.group:
        operation["tags"] = [entry.group]
    operation["summary"] = entry.title or entry.name or ""
    operation["description"] = strip_html(entry.description)
    operation["operationId"] = operation_ids.next_id(entry.name or f"{method}_{normalized_path}")

    params = classify_parameters(entry, method, raw_path, normalized_path)
    if params.parameters is not None:
        operation["parameters"] = params.parameters

    operation["responses"] = build_responses(entry)

    if params.request_body is not None:
        operation["requestBody"] = params.request_body
    return operation
