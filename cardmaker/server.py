"""FastAPI application serving the card form and rendering cards on demand."""

from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .errors import AssetError
from .layout import get_template
from .record import CardRecord
from .render import FontSet, encode_png, load_background, render_card
from .sources import read_card_from_form


logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "emailsignature.png"


class AssetFiles(StaticFiles):
    """Static files that answer 404 while the assets directory is missing."""

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            raise StarletteHTTPException(status_code=404)
        await super().check_config()


def create_app(settings: Optional[Settings] = None, fonts: Optional[FontSet] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    template = get_template(settings.template)
    assets = settings.asset_paths()
    fonts = fonts or FontSet(
        regular=assets.regular_font,
        bold=assets.bold_font,
        italic=assets.italic_font,
    )

    try:
        assets.verify()
    except AssetError as e:
        # Requests will fail with 500 until the file shows up.
        logger.warning("Asset check failed at startup: %s", e)

    app = FastAPI(title="Email Signature Generator")

    def render_png(record: CardRecord) -> bytes:
        background = load_background(assets.background)
        image = render_card(background, fonts, record, template)
        return encode_png(image)

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        if not settings.index_html.is_file():
            raise HTTPException(status_code=404, detail="index.html not found")
        return FileResponse(settings.index_html, media_type="text/html")

    @app.post("/generate-card")
    async def generate_card(request: Request) -> Response:
        try:
            form = await request.form()
        except Exception as e:
            logger.warning("Failed to parse form data: %s", e)
            return PlainTextResponse("Failed to parse form data", status_code=400)

        record = read_card_from_form({key: value for key, value in form.items() if isinstance(value, str)})

        try:
            png = await run_in_threadpool(render_png, record)
        except Exception:
            logger.exception("Error generating image for %r", record.name)
            return PlainTextResponse("Failed to generate business card image", status_code=500)

        return Response(
            content=png,
            media_type="image/png",
            headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'},
        )

    app.mount(
        "/assets",
        AssetFiles(directory=settings.assets_dir, check_dir=False),
        name="assets",
    )

    return app
