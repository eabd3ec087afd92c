"""Route Modules: one file per endpoint family.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes only read the request snapshot and write a response; pure logic lives in core/
"""

GET_HEAD = ["GET", "HEAD"]
