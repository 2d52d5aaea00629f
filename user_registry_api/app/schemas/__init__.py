"""
Pydantic schema definitions for API payloads.

Schemas describe the request and response bodies and feed the
generated OpenAPI document.  Runtime validation of incoming user
payloads lives in ``services.validation`` and shares its rule
constants with these models.
"""
