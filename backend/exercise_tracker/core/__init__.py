"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (the current date is injected)

Design Decisions:
    - Functional core separated from imperative shell: core returns tagged
      results, the shell turns failures into typed exceptions
"""
