"""Loading of apiDoc sources into data models."""
