"""Auto-detect apiDoc source format."""

import re

DEFINE_CALL = re.compile(r"\bdefine\s*\(")


def detect_format(text: str) -> str:
    """Detect the format of an apiDoc source text.

    Returns: 'script' for ``api_data.js`` (a ``define({...})`` call),
    'structured' for anything else (``api_data.json`` or YAML).
    """
    stripped = text.lstrip()

    # A JSON document may mention define( inside a description string
    if stripped.startswith(("{", "[")):
        return "structured"

    if DEFINE_CALL.search(text):
        return "script"

    return "structured"
