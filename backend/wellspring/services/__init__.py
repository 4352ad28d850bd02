"""Services Layer — admin authentication workflows.

Invariants:
    - Services take the store and settings as explicit arguments (no globals)
"""
