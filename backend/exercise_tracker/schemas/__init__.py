"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (form bodies, JSON bodies, responses)
    - Response field aliases (`_id`, `from`, `to`) match the public JSON contract

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Input schemas are lenient about types (forms send strings); the core
      normalizers own the real validation rules
"""
