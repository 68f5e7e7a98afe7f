"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store so the API representation
does not depend on how products are held in memory.
"""
