"""Landing Page: serves the HTML form page at GET /."""

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["landing"])


@router.get("/", include_in_schema=False)
async def landing_page(request: Request):
    return FileResponse(request.app.state.settings.views_dir / "index.html")
