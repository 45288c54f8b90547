"""
Ghostwriter Render Module

Turns analysis responses into the results-panel model and its HTML fragments.
"""

from .pipeline import Badge, EntityTag, DirectionCard, UIModel, build_badges, render
from .markup import (
    RenderedResults,
    render_markup,
    preview_markup,
    preview_loading_markup,
    read_card_attributes,
)

__all__ = [
    "Badge",
    "EntityTag",
    "DirectionCard",
    "UIModel",
    "build_badges",
    "render",
    "RenderedResults",
    "render_markup",
    "preview_markup",
    "preview_loading_markup",
    "read_card_attributes",
]
