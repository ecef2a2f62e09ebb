from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import AssetError


@dataclass
class AssetPaths:
    background: Path
    regular_font: Path
    bold_font: Path
    italic_font: Optional[Path] = None

    @classmethod
    def from_dir(
        cls,
        assets_dir: Path,
        background: str,
        regular_font: str,
        bold_font: str,
        italic_font: Optional[str] = None,
    ) -> "AssetPaths":
        italic = resolve_asset(assets_dir, italic_font) if italic_font else None
        # An italic face is optional: drop it when the file is not there.
        if italic is not None and not italic.exists():
            italic = None
        return cls(
            background=resolve_asset(assets_dir, background),
            regular_font=resolve_asset(assets_dir, regular_font),
            bold_font=resolve_asset(assets_dir, bold_font),
            italic_font=italic,
        )

    def verify(self) -> None:
        """Raise AssetError for the first asset file that does not exist."""
        checks = [
            ("Background image", self.background),
            ("Regular font", self.regular_font),
            ("Bold font", self.bold_font),
        ]
        if self.italic_font is not None:
            checks.append(("Italic font", self.italic_font))
        for kind, path in checks:
            if not path.is_file():
                raise AssetError(f"{kind} file does not exist: {path}")


def resolve_asset(assets_dir: Path, filename: str) -> Path:
    """
    Locate `filename` inside `assets_dir`.

    Search order:
    - the exact name (absolute paths are returned as-is)
    - a file in assets_dir whose name matches ignoring case

    When nothing matches, the exact candidate path is returned so callers
    can report it.
    """
    candidate = Path(filename)
    if not candidate.is_absolute():
        candidate = assets_dir / candidate
    if candidate.exists() or not candidate.parent.is_dir():
        return candidate

    wanted = candidate.name.lower()
    for path in candidate.parent.iterdir():
        if path.is_file() and path.name.lower() == wanted:
            return path
    return candidate
