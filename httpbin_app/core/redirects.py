"""Redirect Chain: next hop for /redirect/{n} and /absolute-redirect/{n}.

Invariants:
    - n <= 1 always points at /get
    - n > 1 points at the same endpoint with n - 1
    - A chain started at n therefore has exactly max(n, 1) hops
"""

TERMINAL_PATH = "/get"


def next_redirect_location(n: int, endpoint: str, prefix: str = "") -> str:
    """Location for hop n of a redirect chain rooted at `endpoint`."""
    if n <= 1:
        return prefix + TERMINAL_PATH
    return f"{prefix}{endpoint}/{n - 1}"
