"""
Test Configuration
==================

Shared fixtures: a generated background image, the built-in font set and
sample card records. No font files are needed on disk.
"""

from pathlib import Path

import pytest
from PIL import Image

from cardmaker.assets import AssetPaths
from cardmaker.record import CardRecord
from cardmaker.render import FontSet


BACKGROUND_SIZE = (600, 400)
BACKGROUND_COLOR = (10, 20, 30, 255)


@pytest.fixture
def background_path(tmp_path: Path) -> Path:
    path = tmp_path / "background_image.png"
    Image.new("RGBA", BACKGROUND_SIZE, BACKGROUND_COLOR).save(path, format="PNG")
    return path


@pytest.fixture
def font_files(tmp_path: Path) -> dict:
    """Placeholder font files; only their existence is checked."""
    paths = {}
    for role in ("Regular", "Bold", "Italic"):
        path = tmp_path / f"Raleway-{role}.ttf"
        path.write_bytes(b"")
        paths[role.lower()] = path
    return paths


@pytest.fixture
def asset_paths(background_path: Path, font_files: dict) -> AssetPaths:
    return AssetPaths(
        background=background_path,
        regular_font=font_files["regular"],
        bold_font=font_files["bold"],
        italic_font=font_files["italic"],
    )


@pytest.fixture
def fonts() -> FontSet:
    return FontSet()


@pytest.fixture
def full_record() -> CardRecord:
    return CardRecord(
        name="Ada Lovelace",
        pronouns="she/her",
        title="Lead Analyst",
        company="Analytical Engines",
        department="Research",
        address="12 St James's Square, London",
        phone_number="555-123-4567",
        email="ada@example.com",
        attribution_lines=["We acknowledge the land", "on which we work."],
    )
