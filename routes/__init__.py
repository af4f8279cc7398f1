"""API route exports."""

from .frontend import router as frontend_router
from .transcribe import router as transcribe_router

__all__ = ["frontend_router", "transcribe_router"]
