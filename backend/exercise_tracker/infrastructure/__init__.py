"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic, only core types/errors
    - All SQLAlchemy failures mapped to typed tracker errors before leaving this layer
"""
