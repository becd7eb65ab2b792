"""Query Store implementations — SQLAlchemy AsyncSession-backed stores.

Invariants:
    - One store per entity, each satisfying its Protocol in core/repository_protocols.py
    - Cascades are explicit statements executed in dependency order, not ORM side effects
    - Every write commits; SQLAlchemy failures surface as DatabaseError

Design Decisions:
    - Stores receive the request's AsyncSession in __init__ so one service call
      shares a single session across every store it touches
"""
