"""
Helpers for reading request metadata.
"""

from typing import Optional
from fastapi import Request


def get_client_origin(request: Request) -> Optional[str]:
    """
    Best-effort network origin of the caller.

    Prefers the first hop of X-Forwarded-For when running behind a proxy.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client is not None:
        return request.client.host
    return None
