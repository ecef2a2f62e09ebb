class CardError(Exception):
    """Base error for card generation."""


class AssetError(CardError):
    """A background image or font file is missing or cannot be decoded."""


class CardSourceError(CardError):
    """Card records could not be read from their source."""


class CardOutputError(CardError):
    """A rendered card could not be written."""
