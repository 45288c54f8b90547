"""
Results Markup

Applies the Jinja2 templates in ``ghostwriter/templates`` to a UIModel. Autoescaping
is always on, so no response text can turn into markup.
"""

from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Dict, List, Optional, Tuple

from jinja2 import Environment, PackageLoader, select_autoescape

from ghostwriter.core.constants import DIRECTION_HINT, PREVIEW_LOADING
from ghostwriter.render.pipeline import UIModel

_environment: Optional[Environment] = None


def get_environment() -> Environment:
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=PackageLoader("ghostwriter", "templates"),
            autoescape=select_autoescape(default=True, default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
    return _environment


@dataclass(frozen=True)
class RenderedResults:
    """HTML fragments for the results panel."""
    badges: str
    entities: str
    directions: str


def render_markup(model: UIModel) -> RenderedResults:
    env = get_environment()
    return RenderedResults(
        badges=env.get_template("badges.html").render(badges=model.badges).strip(),
        entities=env.get_template("entities.html").render(entities=model.entities).strip(),
        directions=env.get_template("directions.html").render(
            cards=model.directions, hint=DIRECTION_HINT
        ).strip(),
    )


def preview_loading_markup() -> str:
    return get_environment().get_template("preview_loading.html").render(
        message=PREVIEW_LOADING
    ).strip()


def preview_markup(text: str) -> str:
    return get_environment().get_template("preview.html").render(text=text).strip()


# =============================================================================
# CARD ATTRIBUTE READ-BACK
# =============================================================================

class _CardAttributeParser(HTMLParser):
    """Collects (data-name, data-desc) for every element with class ``direction``."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.cards: List[Tuple[str, str]] = []

    def handle_starttag(self, tag, attrs):
        attributes: Dict[str, Optional[str]] = dict(attrs)
        classes = (attributes.get("class") or "").split()
        if "direction" in classes:
            self.cards.append((attributes.get("data-name") or "", attributes.get("data-desc") or ""))


def read_card_attributes(directions_html: str, index: int) -> Tuple[str, str]:
    """
    Read a rendered card's name and description back from its attributes.

    Args:
        directions_html: The rendered directions fragment
        index: 0-based card position

    Returns:
        (name, description) with character references decoded

    Raises:
        IndexError: If there is no card at ``index``
    """
    parser = _CardAttributeParser()
    parser.feed(directions_html)
    parser.close()
    if index < 0:
        raise IndexError(f"No direction card at index {index}")
    return parser.cards[index]
