import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .assets import AssetPaths


PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_INDEX_HTML = PACKAGE_DIR / "static" / "index.html"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class Settings:
    """
    Server settings, read from CARDMAKER_* environment variables.

    Asset file names are resolved inside `assets_dir`.
    """

    assets_dir: Path = Path("assets")
    background: str = "background_image.png"
    regular_font: str = "Raleway-Regular.ttf"
    bold_font: str = "Raleway-Bold.ttf"
    italic_font: Optional[str] = "Raleway-Italic.ttf"
    template: str = "footer"
    index_html: Path = field(default_factory=lambda: DEFAULT_INDEX_HTML)
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default):
            return env.get(f"CARDMAKER_{name}") or default

        try:
            port = int(get("PORT", defaults.port))
        except ValueError as e:
            raise ValueError(f"CARDMAKER_PORT must be an integer: {e}") from e

        # An explicitly empty value turns the italic face off.
        if "CARDMAKER_ITALIC_FONT" in env:
            italic_font = env["CARDMAKER_ITALIC_FONT"] or None
        else:
            italic_font = defaults.italic_font

        return cls(
            assets_dir=Path(get("ASSETS_DIR", defaults.assets_dir)),
            background=get("BACKGROUND", defaults.background),
            regular_font=get("REGULAR_FONT", defaults.regular_font),
            bold_font=get("BOLD_FONT", defaults.bold_font),
            italic_font=italic_font,
            template=get("TEMPLATE", defaults.template),
            index_html=Path(get("INDEX_HTML", defaults.index_html)),
            host=get("HOST", defaults.host),
            port=port,
            log_level=get("LOG_LEVEL", defaults.log_level).upper(),
        )

    def asset_paths(self) -> AssetPaths:
        return AssetPaths.from_dir(
            self.assets_dir,
            background=self.background,
            regular_font=self.regular_font,
            bold_font=self.bold_font,
            italic_font=self.italic_font,
        )


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the package logger."""
    logger = logging.getLogger("cardmaker")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
