"""
Pydantic schema definitions for API payloads.

Field names are snake_case in Python and camelCase on the wire
(``full_name`` ↔ ``fullName``) through a shared alias generator.
Schemas are kept separate from the SQL in ``services``.
"""
