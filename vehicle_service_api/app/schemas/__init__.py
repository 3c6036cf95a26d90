"""
Pydantic schema definitions for API payloads.

Schemas use snake_case attributes in Python and camelCase keys on the
wire.  They are separate from the store records in ``core.store`` so
the JSON representation can evolve independently of storage.
"""
