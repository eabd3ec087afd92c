"""Core: pure request/response helpers with no FastAPI routing.

Invariants:
    - No module here registers routes or touches app.state
"""
