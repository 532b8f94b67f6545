"""apiDoc type annotation to OpenAPI schema mapping.

apiDoc annotations are free-form: ``String``, ``Number[]``, ``String[64]``,
``Object|null``, ``String/Number``. Nothing here raises; anything not
recognized becomes an opaque object carrying the original text.
"""

import copy
import logging
import re

logger = logging.getLogger(__name__)

STRING_WITH_LENGTH_RE = re.compile(r"string\[(\d+)\]", re.IGNORECASE)

LITERAL_TYPES = {
    "string": {"type": "string"},
    "integer": {"type": "integer"},
    "number": {"type": "number"},
    "float": {"type": "number"},
    "double": {"type": "number"},
    "boolean": {"type": "boolean"},
    "bool": {"type": "boolean"},
    "object": {"type": "object"},
    "array": {"type": "array", "items": {}},
    "buffer": {"type": "string", "format": "binary"},
}


def map_single_type(annotation: str | None) -> dict:
    """Map a single (non-union) annotation to a schema node."""
    trimmed = (annotation or "").strip()
    if not trimmed:
        return {"type": "string"}

    if trimmed.endswith("[]"):
        return {"type": "array", "items": map_single_type(trimmed[:-2])}

    # "String/Number": only the part before the first slash is kept
    if "/" in trimmed:
        return map_single_type(trimmed[: trimmed.index("/")])

    match = STRING_WITH_LENGTH_RE.search(trimmed)
    if match:
        return {"type": "string", "maxLength": int(match.group(1))}

    literal = LITERAL_TYPES.get(trimmed.lower())
    if literal is not None:
        return copy.deepcopy(literal)

    logger.debug("Unknown apiDoc type %r, mapping to object", trimmed)
    return {"type": "object", "description": f"Original type: {trimmed}"}


def map_type_to_schema(annotation: str | None) -> dict:
    """Map an annotation that may be a ``|`` union, possibly with ``null``."""
    if not annotation or not annotation.strip():
        return {"type": "string"}

    parts = [p.strip() for p in annotation.split("|") if p.strip()]
    alternatives = [p for p in parts if p.lower() != "null"]
    nullable = len(alternatives) < len(parts)

    if len(alternatives) > 1:
        schema = {"oneOf": [map_single_type(p) for p in alternatives]}
    else:
        schema = map_single_type(alternatives[0] if alternatives else annotation)

    if nullable:
        schema["nullable"] = True
    return schema
