"""
Registry error types.

``SchemaNotFoundError`` is the only error a request can produce; the API maps
it to a 404 response. ``RegistryError`` is raised while building the registry
at startup and never reaches a client.
"""

from __future__ import annotations


class RegistryError(ValueError):
    """The registry definition is malformed."""


class SchemaNotFoundError(LookupError):
    """No schema is registered under the requested identifier."""

    http_status = 404

    def __init__(self, schema_id: str):
        self.schema_id = schema_id
        self.message = f"Schema '{schema_id}' not found"
        super().__init__(self.message)
