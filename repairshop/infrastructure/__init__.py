"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports domain services
    - SQLAlchemy failures are mapped to core.errors.DatabaseError here

Design Decisions:
    - Engine lifecycle owned by a single manager initialized in the app lifespan
"""
