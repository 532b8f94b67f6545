"""apiDoc to OpenAPI 3.0 document conversion."""

import functools
import json
import logging
import re
from typing import Any

from apidoc2openapi.config import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    DEFAULT_VERSION,
    OPENAPI_VERSION,
    DocumentInfo,
)
from apidoc2openapi.converter.operation import OperationIdGenerator, build_operation
from apidoc2openapi.converter.text import normalize_path
from apidoc2openapi.parser.apidoc import realize_description
from apidoc2openapi.parser.base import ApiDescription, ApiEntry

logger = logging.getLogger(__name__)

NUMERIC_RE = re.compile(r"\d+")


def latest_version(entries: list[ApiEntry]) -> str:
    """Return the highest entry version, compared numerically per dot component.

    Missing components count as 0, and so does any component that is not
    purely digits ("0-beta", "1a").
    """
    versions = [e.version for e in entries if e.version]
    if not versions:
        return DEFAULT_VERSION
    # sorted() is stable, so equal versions keep input order
    return sorted(versions, key=functools.cmp_to_key(_compare_versions), reverse=True)[0]


def _compare_versions(a: str, b: str) -> int:
    ap = _version_parts(a)
    bp = _version_parts(b)
    for i in range(max(len(ap), len(bp))):
        av = ap[i] if i < len(ap) else 0
        bv = bp[i] if i < len(bp) else 0
        if av != bv:
            return av - bv
    return 0


def _version_parts(version: str) -> list[int]:
    parts = []
    for component in version.split("."):
        component = component.strip()
        parts.append(int(component) if NUMERIC_RE.fullmatch(component) else 0)
    return parts


def convert(description: ApiDescription | dict[str, Any], info: DocumentInfo | dict | None = None) -> dict:
    """Convert an apiDoc description into an OpenAPI document dict.

    Entries are processed in order. For each (path, method) pair only the
    first entry is kept; later duplicates are dropped.
    """
    description = realize_description(description)
    if isinstance(info, dict):
        info = DocumentInfo.model_validate(info)

    entries = description.api
    document = {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": DEFAULT_TITLE,
            "version": latest_version(entries),
            "description": DEFAULT_DESCRIPTION,
            **(info.as_overrides() if info else {}),
        },
        "paths": {},
        "components": {"schemas": {}},
    }

    operation_ids = OperationIdGenerator()
    paths = document["paths"]

    for entry in entries:
        method = (entry.type or "get").lower()
        raw_path = entry.url or "/unknown"
        normalized_path = normalize_path(raw_path)

        path_item = paths.setdefault(normalized_path, {})
        if method in path_item:
            logger.debug("Skipping duplicate %s %s (%s)", method.upper(), normalized_path, entry.name or entry.title)
            continue

        path_item[method] = build_operation(entry, method, raw_path, normalized_path, operation_ids)

    logger.info("Converted %d operations across %d paths", sum(len(p) for p in paths.values()), len(paths))
    return document


def convert_to_json(description: ApiDescription | dict[str, Any], info: DocumentInfo | dict | None = None) -> str:
    """Convert and serialize as 2-space indented JSON."""
    return json.dumps(convert(description, info), indent=2, ensure_ascii=False, allow_nan=False)
