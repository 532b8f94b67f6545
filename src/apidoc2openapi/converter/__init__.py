"""Conversion of apiDoc descriptions into OpenAPI 3.0 documents."""
