"""Page routes: index page from the data dir plus per-name greetings."""

from __future__ import annotations

import html
import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_PAGE = (
    "<html><head><title>hello world</title></head>"
    "<body>hello world!<br><br><i>powered by hellohealth</i></body></html>\n"
)


def load_page(filename: str, data_dir: str | Path) -> str:
    """Read ``filename`` from ``data_dir``, falling back to the default page."""
    path = Path(data_dir) / filename
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        logger.warning("%s not found, serving default hello world page", path)
        return DEFAULT_PAGE
    logger.debug("Serving %s", path)
    return content


@router.get("/", response_class=HTMLResponse)
def index(request: Request) -> str:
    return load_page("index.html", request.app.state.data_dir)


@router.get("/{name:path}", response_class=HTMLResponse)
def hello(name: str) -> str:
    name = html.escape(name)
    return f"<html><head><title>hello {name}</title></head><body>hello {name}!</body></html>\n"
