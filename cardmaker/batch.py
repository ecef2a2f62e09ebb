import logging
from pathlib import Path
from typing import List, Optional

from .assets import AssetPaths
from .errors import CardOutputError
from .layout import CardTemplate
from .render import FontSet, load_background, render_card
from .sources import read_cards_from_csv


logger = logging.getLogger(__name__)


class CardPipeline:
    """
    Batch card generation:
    - verify the background and font files exist
    - read card records from the CSV
    - render each record and save it as
      {output_dir}/{Name_with_underscores}_email_signature.png
    """

    def __init__(
        self,
        assets: AssetPaths,
        output_dir: Path,
        template: CardTemplate,
        fonts: Optional[FontSet] = None,
    ) -> None:
        self.assets = assets
        self.output_dir = output_dir
        self.template = template
        self.fonts = fonts or FontSet(
            regular=assets.regular_font,
            bold=assets.bold_font,
            italic=assets.italic_font,
        )

    def run(self, csv_path: Path) -> List[Path]:
        self.assets.verify()
        cards = read_cards_from_csv(csv_path)
        if not cards:
            print("No cards found in the CSV file.")
            return []

        background = load_background(self.assets.background)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CardOutputError(f"failed to create output directory {self.output_dir}: {e}") from e

        written: List[Path] = []
        for card in cards:
            image = render_card(background, self.fonts, card, self.template)
            output_path = self.output_dir / card.output_filename()
            try:
                image.save(output_path, format="PNG")
            except OSError as e:
                raise CardOutputError(f"failed to write {output_path}: {e}") from e
            logger.debug("Wrote %s", output_path)
            print(f"Successfully generated business card: {output_path.name}")
            written.append(output_path)

        return written
