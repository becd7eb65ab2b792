"""Core Layer — pure domain rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services orchestrate
      store IO around these rules
"""
