"""apidoc2openapi — convert apiDoc output (api_data.js) to OpenAPI 3.0."""

from apidoc2openapi.config import DocumentInfo
from apidoc2openapi.converter.document import convert, convert_to_json
from apidoc2openapi.parser.apidoc import ConfigurationError, load_description, parse_description_source

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DocumentInfo",
    "convert",
    "convert_to_json",
    "load_description",
    "parse_description_source",
]
