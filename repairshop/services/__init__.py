"""Services Layer — domain services for users, devices and repairs.

Invariants:
    - Each service receives its stores through __init__ (wired in api/deps.py)
    - Services raise domain errors at the point of detection and never catch them
    - Services return response schemas, never ORM entities

Design Decisions:
    - One service per aggregate root for locality; cross-entity checks
      (owner, device, technician exist) go through the other entity's store
"""
