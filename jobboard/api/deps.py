from __future__ import annotations

from typing import Optional

from fastapi import Header

from jobboard.core.exceptions import NotAuthenticated


def current_user_id(x_user_id: Optional[str] = Header(default=None)) -> int:
    """FastAPI dependency returning the caller's user id.

    Authentication happens upstream; the identity layer forwards the verified
    id in the ``X-User-Id`` header. Usage in route handlers:

        def handler(user_id: int = Depends(current_user_id)):
            ...
    """
    if not x_user_id or not x_user_id.strip().isdigit():
        raise NotAuthenticated()
    return int(x_user_id)


__all__ = ["current_user_id"]
