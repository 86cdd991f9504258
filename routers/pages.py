from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


@router.get("/", response_class=HTMLResponse)
async def stage1_page():
    return HTMLResponse((TEMPLATE_DIR / "stage1_get_calls.html").read_text(encoding="utf-8"))
