"""Services: orchestration between routes, the pure core and the store.

Invariants:
    - Services hold no state between requests
    - Core ValidationFailure values become ExerciseValidationError here, nowhere else
"""
