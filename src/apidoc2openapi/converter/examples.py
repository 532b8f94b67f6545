"""Parser for apiDoc example blocks.

An example block is free text such as::

    HTTP/1.1 200 OK
    {
      "id": 1
    }

The status line is optional and the body may or may not be JSON.
"""

import json
import logging
import re
from typing import Any, NamedTuple

logger = logging.getLogger(__name__)

STATUS_LINE_RE = re.compile(r"HTTP/1\.1\s+(\d{3})", re.IGNORECASE)
LEADING_STATUS_LINE_RE = re.compile(r"^HTTP/1\.1", re.IGNORECASE)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class ExampleResult(NamedTuple):
    status: str | None
    body: Any


def parse_example(content: str | None) -> ExampleResult:
    """Split an example block into its HTTP status code and body.

    The body is the decoded JSON value when the text parses, otherwise the
    raw text (tabs expanded to two spaces). An empty body is ``None``.
    """
    if not content:
        return ExampleResult(None, None)

    match = STATUS_LINE_RE.search(content)
    status = match.group(1) if match else None

    lines = content.split("\n")
    if match and LEADING_STATUS_LINE_RE.match(lines[0]):
        lines = lines[1:]

    body_text = "\n".join(lines).strip()
    if not body_text:
        return ExampleResult(status, None)

    clean = body_text.replace("\t", "  ")
    try:
        return ExampleResult(status, json.loads(clean, parse_constant=_reject_constant))
    except ValueError:
        logger.debug("Example body is not JSON, keeping raw text")
        return ExampleResult(status, clean)
