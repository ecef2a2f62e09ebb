"""
Business card / email signature renderer.

Modules:
- record: the card record and its field helpers
- layout: card templates and line placement
- render: fonts, background loading and drawing
- assets: asset path resolution and checks
- sources: CSV and form readers
- batch: CSV-to-PNG pipeline
- server: FastAPI form server
- config: environment settings and logging setup
"""

from .errors import AssetError, CardError, CardOutputError, CardSourceError
from .record import CardRecord, format_phone

__all__ = [
    "AssetError",
    "CardError",
    "CardOutputError",
    "CardRecord",
    "CardSourceError",
    "format_phone",
]
