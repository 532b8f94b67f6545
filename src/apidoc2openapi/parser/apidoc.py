"""apiDoc source loader.

Turns the contents of ``api_data.js`` (a script calling ``define({...})``
once) or ``api_data.json`` into an ApiDescription. The script is never
executed: the argument of the registration call is decoded as data, so
the source gets no access to the filesystem, network, or process.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .base import ApiDescription
from .detect import DEFINE_CALL, detect_format

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """The apiDoc description is structurally unusable."""


def load_description(file_path: Path) -> ApiDescription:
    """Read an apiDoc source file and return its ApiDescription."""
    try:
        source = Path(file_path).read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Cannot read apiDoc source {file_path}: {e}") from e
    return parse_description_source(source)


def parse_description_source(source: bytes | str) -> ApiDescription:
    """Parse apiDoc source text (script or structured) into an ApiDescription."""
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"apiDoc source is not valid UTF-8: {e}") from e

    fmt = detect_format(source)
    logger.debug("Detected apiDoc source format: %s", fmt)

    if fmt == "script":
        data = _parse_script(source)
    else:
        data = _parse_structured(source)

    return realize_description(data)


def realize_description(data: Any) -> ApiDescription:
    """Validate a realized ``{api: [...]}`` structure into an ApiDescription."""
    if isinstance(data, ApiDescription):
        return data
    if not isinstance(data, dict) or not isinstance(data.get("api"), list):
        raise ConfigurationError("Cannot find api array in apiDoc description")
    try:
        return ApiDescription.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid apiDoc entry: {e}") from e


def _parse_script(text: str) -> Any:
    """Decode the argument of the last ``define(...)`` call in the script.

    Scanning resumes after each decoded argument, so ``define(`` inside a
    description string is never taken for a call.
    """
    decoder = json.JSONDecoder()
    registered = None
    found = False
    pos = 0

    while True:
        match = DEFINE_CALL.search(text, pos)
        if match is None:
            break
        start = _skip_whitespace(text, match.end())
        pos = match.end()

        try:
            value, end = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            value, end = _decode_relaxed(text, start)

        if not isinstance(value, dict):
            continue
        registered = value
        found = True
        pos = end

    if not found:
        raise ConfigurationError("No define() registration call found in apiDoc source")
    return registered


def _decode_relaxed(text: str, start: int) -> tuple[Any, int]:
    """Fallback for hand-written sources: YAML flow syntax up to the last ')'."""
    end = text.rfind(")")
    if end <= start:
        return None, start
    try:
        return yaml.safe_load(text[start:end]), end
    except yaml.YAMLError:
        logger.debug("Skipping undecodable define() call at offset %d", start)
        return None, start


def _parse_structured(text: str) -> Any:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse apiDoc description: {e}") from e

    # api_data.json is the bare entry list
    if isinstance(data, list):
        return {"api": data}
    return data


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos
