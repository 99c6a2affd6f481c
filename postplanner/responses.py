"""
PostPlanner API Response Utilities
Standardized response envelope and error handling
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from .errors import ConstraintViolation
from .logging_config import api_logger


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


# ============================================================
# SUCCESS RESPONSES
# ============================================================

def success(data: Any = None, message: Optional[str] = None, meta: Optional[Dict] = None) -> Dict:
    """Create success response"""
    response = {
        "ok": True,
        "timestamp": _timestamp(),
    }

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    if meta:
        response["meta"] = meta

    return response


def deleted(message: str = "Deleted successfully") -> Dict:
    """200 Deleted response"""
    return success(message=message)


# ============================================================
# EXCEPTION HANDLER
# ============================================================

async def api_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render rejected writes (409) and HTTP errors in the error envelope."""

    # Handle ConstraintViolation
    if isinstance(exc, ConstraintViolation):
        api_logger.warning(
            f"Constraint violation: {exc}",
            path=request.url.path,
            **exc.to_dict(),
        )
        return JSONResponse(
            status_code=409,
            content={
                "ok": False,
                "error": str(exc),
                "error_code": "CONSTRAINT_VIOLATION",
                "details": exc.to_dict(),
                "timestamp": _timestamp(),
            },
        )

    # Handle HTTPException
    api_logger.warning(
        f"HTTP Error: {exc.detail}",
        status_code=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "ok": False,
            "error": exc.detail,
            "error_code": f"HTTP_{exc.status_code}",
            "timestamp": _timestamp(),
        },
        headers=getattr(exc, "headers", None),
    )
