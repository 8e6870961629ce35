"""
Admin front-end entry point.

The admin page itself is built elsewhere; this only serves it from disk.
"""

from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse
from backoffice.app.core.config import settings
from backoffice.app.core.exceptions import ResourceNotFoundError

ADMIN_PAGE = "admin.html"

router = APIRouter(tags=["Front-end"])


@router.get("/", include_in_schema=False)
async def admin_page():
    page = Path(settings.static_dir) / ADMIN_PAGE
    if not page.is_file():
        raise ResourceNotFoundError("Admin page")
    return FileResponse(page)
