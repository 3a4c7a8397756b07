"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the domain dataclasses in ``models`` so
that the wire representation (camelCase field names, validation rules)
does not leak into the service layer.
"""
