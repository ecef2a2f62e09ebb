import io
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from .errors import AssetError
from .layout import CardTemplate, FontRole, layout_card
from .record import CardRecord


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FontSet:
    """
    Font files for the regular / bold / italic roles.

    Faces are loaded lazily per (role, size) and cached. A missing italic
    file falls back to the regular face. With no files at all, Pillow's
    built-in scalable font is used for every role.
    """

    def __init__(
        self,
        regular: Optional[PathLike] = None,
        bold: Optional[PathLike] = None,
        italic: Optional[PathLike] = None,
    ) -> None:
        self.paths: Dict[str, Optional[Path]] = {
            "regular": Path(regular) if regular else None,
            "bold": Path(bold) if bold else None,
            "italic": Path(italic) if italic else None,
        }
        self._faces: Dict[Tuple[str, int], ImageFont.FreeTypeFont] = {}

    def face(self, role: FontRole, size: int) -> ImageFont.FreeTypeFont:
        key = (role, size)
        if key not in self._faces:
            self._faces[key] = self._load(role, size)
        return self._faces[key]

    def _load(self, role: str, size: int):
        path = self.paths.get(role)
        if path is None and role == "italic":
            path = self.paths["regular"]
        if path is None:
            return ImageFont.load_default(size=size)
        try:
            return ImageFont.truetype(str(path), size=size)
        except OSError as e:
            raise AssetError(f"failed to load {role} font {path}: {e}") from e


def load_background(path: PathLike) -> Image.Image:
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except FileNotFoundError as e:
        raise AssetError(f"failed to open background image: {path}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise AssetError(f"failed to decode background image {path}: {e}") from e


def render_card(
    background: Image.Image,
    fonts: FontSet,
    record: CardRecord,
    template: CardTemplate,
) -> Image.Image:
    """
    Compose the card: the background with every template line drawn on top.
    """
    # convert() always returns a new image, so the background is never mutated.
    img = background.convert("RGBA")
    draw = ImageDraw.Draw(img)

    for line in layout_card(record, template):
        if not line.text:
            continue
        font = fonts.face(line.style.font, line.style.size)
        # Coordinates are baselines; "ls" anchors text at left/baseline.
        draw.text((line.x, line.y), line.text, font=font, fill=line.style.color, anchor="ls")

    logger.debug("Rendered %r card for %r", template.name, record.name)
    return img


def encode_png(img: Image.Image) -> bytes:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
