import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from cardmaker.assets import AssetPaths
from cardmaker.batch import CardPipeline
from cardmaker.config import configure_logging
from cardmaker.errors import CardError
from cardmaker.layout import TEMPLATES, get_template


logger = logging.getLogger("cardmaker.cli")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate email signature images for every row of a CSV file."
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=Path("./cards.csv"),
        help="CSV with columns: name, pronouns, title, company, address, phone, email.",
    )
    parser.add_argument(
        "--background",
        type=Path,
        default=Path("./BrandingGuidelines_2025.png"),
        help="Background PNG the text is drawn onto.",
    )
    parser.add_argument("--regular-font", type=Path, default=Path("./Raleway-Regular.ttf"))
    parser.add_argument("--bold-font", type=Path, default=Path("./Raleway-Bold.ttf"))
    parser.add_argument(
        "--italic-font",
        type=Path,
        default=None,
        help="Optional italic font; the regular font is used when omitted.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Folder where generated PNGs are written.",
    )
    parser.add_argument(
        "--template",
        choices=sorted(TEMPLATES),
        default="branded",
        help="Card layout to render.",
    )
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()

    args = parse_args(argv)
    configure_logging(args.log_level.upper())

    assets = AssetPaths(
        background=args.background,
        regular_font=args.regular_font,
        bold_font=args.bold_font,
        italic_font=args.italic_font,
    )
    if not args.csv.is_file():
        logger.error("CSV file does not exist: %s", args.csv)
        return 1

    pipeline = CardPipeline(
        assets=assets,
        output_dir=args.output_dir,
        template=get_template(args.template),
    )
    try:
        pipeline.run(args.csv)
    except CardError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
