"""Serves the single-page upload form."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

INDEX_PAGE = Path(__file__).resolve().parent.parent / "frontend" / "index.html"

router = APIRouter(tags=["frontend"])


@router.get("/", response_class=FileResponse)
def upload_form() -> FileResponse:
    """Returns the upload form page."""
    return FileResponse(INDEX_PAGE, media_type="text/html")
