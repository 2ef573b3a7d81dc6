"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from mindnote.backend.core.database import get_db_session

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_request_id(
    request: Request,
    x_request_id: str | None = Header(None),
) -> str:
    """
    Return the request ID for response metadata.

    Prefers the ID assigned by RequestContextMiddleware so that logs,
    headers and response bodies carry the same value.
    """
    request_id = getattr(request.state, "request_id", None)
    return request_id or x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]
