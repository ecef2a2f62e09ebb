from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Optional, Tuple

from .record import CardRecord, format_phone


FontRole = Literal["regular", "bold", "italic"]
Color = Tuple[int, int, int, int]

ORANGE: Color = (242, 103, 34, 255)
BLUE: Color = (0, 48, 71, 255)
GRAY: Color = (109, 110, 113, 255)
BRIGHT_ORANGE: Color = (255, 165, 0, 255)
LIGHT_GRAY: Color = (200, 200, 200, 255)
WHITE: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class TextStyle:
    font: FontRole
    size: int
    color: Color


@dataclass(frozen=True)
class LineSpec:
    field: str
    style: TextStyle
    # Cursor movement after the line is drawn.
    advance: int
    prefix: str = ""
    optional: bool = False
    space_before: int = 0
    formatter: Optional[Callable[[str], str]] = None


@dataclass(frozen=True)
class CardTemplate:
    name: str
    x: int
    start_y: int
    lines: Tuple[LineSpec, ...]


@dataclass(frozen=True)
class PlacedLine:
    text: str
    style: TextStyle
    x: int
    y: int  # baseline


def layout_card(record: CardRecord, template: CardTemplate) -> List[PlacedLine]:
    """
    Walk the template top to bottom and place every line on its baseline.

    Optional lines with a blank value are dropped without moving the cursor,
    so the lines below them sit exactly where they would if the field had
    never existed.
    """
    placed: List[PlacedLine] = []
    y = template.start_y
    for spec in template.lines:
        for value in _field_values(record, spec.field):
            if spec.formatter is not None:
                value = spec.formatter(value)
            if spec.optional and not value.strip():
                continue
            y += spec.space_before
            placed.append(
                PlacedLine(text=f"{spec.prefix}{value}", style=spec.style, x=template.x, y=y)
            )
            y += spec.advance
    return placed


def _field_values(record: CardRecord, field_name: str) -> List[str]:
    if field_name == "attribution_lines":
        return list(record.attribution_lines)
    return [getattr(record, field_name)]


def _branded() -> CardTemplate:
    name = TextStyle("bold", 20, ORANGE)
    title = TextStyle("bold", 15, BLUE)
    company = TextStyle("bold", 14, GRAY)
    other = TextStyle("regular", 13, GRAY)
    return CardTemplate(
        name="branded",
        x=70,
        start_y=25,
        lines=(
            LineSpec("name", name, advance=20),
            LineSpec("pronouns", other, advance=14, optional=True),
            LineSpec("title", title, advance=15),
            # Company line advances by the title size, not its own.
            LineSpec("company", company, advance=15, space_before=10),
            LineSpec("department", other, advance=13, optional=True),
            LineSpec("address", other, advance=13),
            LineSpec("phone_number", other, advance=13, formatter=format_phone),
            LineSpec("email", other, advance=13),
            LineSpec("attribution_lines", other, advance=13, optional=True),
        ),
    )


def _footer() -> CardTemplate:
    name = TextStyle("bold", 36, BRIGHT_ORANGE)
    pronouns = TextStyle("italic", 18, WHITE)
    mid = TextStyle("bold", 28, LIGHT_GRAY)
    other = TextStyle("regular", 24, WHITE)
    return CardTemplate(
        name="footer",
        x=50,
        start_y=100,
        lines=(
            LineSpec("name", name, advance=41),
            LineSpec("pronouns", pronouns, advance=23, optional=True),
            LineSpec("title", mid, advance=38, prefix="Title: ", space_before=10),
            LineSpec("company", mid, advance=38, prefix="Company: "),
            LineSpec("department", mid, advance=38, prefix="Department: ", optional=True),
            LineSpec("address", other, advance=34, prefix="Address: "),
            LineSpec("phone_number", other, advance=34, prefix="Phone: ", formatter=format_phone),
            LineSpec("email", other, advance=34, prefix="Email: "),
            LineSpec("attribution_lines", other, advance=29, optional=True),
        ),
    )


TEMPLATES: Dict[str, CardTemplate] = {
    "branded": _branded(),
    "footer": _footer(),
}


def get_template(name: str) -> CardTemplate:
    try:
        return TEMPLATES[name]
    except KeyError:
        raise ValueError(
            f"Unknown card template {name!r}; choose one of {', '.join(sorted(TEMPLATES))}"
        ) from None
