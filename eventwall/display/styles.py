"""Pure style derivations from display settings.

Every function takes the settings (and a :class:`Scale`) and returns a
CSS-like dict with camelCase property names. The public display renders at
:data:`FULL`; the settings preview renders at :data:`PREVIEW`.
"""
import re
from dataclasses import dataclass

from eventwall.schemas.display_settings import DisplaySettingsFields

HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

DEFAULT_TEXT_BACKGROUND = "rgba(0,0,0,0.5)"

MAX_WIDTHS = {"full": "100%", "3/4": "75%", "1/2": "50%", "1/3": "33.333%"}

IMAGE_ALIGNMENT = {
    "center": ("center", "center"),
    "top": ("flex-start", "center"),
    "bottom": ("flex-end", "center"),
    "left": ("center", "flex-start"),
    "right": ("center", "flex-end"),
}


@dataclass(frozen=True)
class Scale:
    factor: float
    font_floor: float = 0
    padding_floor: float = 0

    def font(self, size: float) -> float:
        return max(self.font_floor, size * self.factor)

    def padding(self, size: float) -> float:
        return max(self.padding_floor, size * self.factor)

    def border(self, width: float) -> float:
        return width * self.factor


FULL = Scale(factor=1.0)
PREVIEW = Scale(factor=0.5, font_floor=8, padding_floor=2)


def px(value: float) -> str:
    return f"{value:g}px"


def hex_to_rgba(color: str | None, opacity: int | float) -> str | None:
    """``#rrggbb`` plus a 0-100 opacity as ``rgba(r,g,b,a)``; None if unparseable."""
    if not color:
        return None
    match = HEX_COLOR.match(color.strip())
    if not match:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    alpha = min(max(opacity, 0), 100) / 100
    return f"rgba({r},{g},{b},{alpha:g})"


def max_width(value: str) -> str:
    return MAX_WIDTHS.get(value, "100%")


def image_alignment(position: str) -> dict:
    align, justify = IMAGE_ALIGNMENT.get(position, IMAGE_ALIGNMENT["center"])
    return {"display": "flex", "alignItems": align, "justifyContent": justify}


def border_style(settings: DisplaySettingsFields, scale: Scale = FULL) -> dict:
    if settings.border_style == "none":
        return {"borderWidth": px(0)}
    return {
        "borderStyle": settings.border_style,
        "borderWidth": px(scale.border(settings.border_width)),
        "borderColor": settings.border_color,
    }


def background_style(settings: DisplaySettingsFields | None) -> dict:
    if settings is not None and settings.background_path:
        return {
            "backgroundImage": f"url({settings.background_path})",
            "backgroundSize": "cover",
            "backgroundPosition": "center",
            "backgroundRepeat": "no-repeat",
        }
    return {"backgroundColor": "white"}


def text_background(settings: DisplaySettingsFields) -> str:
    if not settings.text_background:
        return "transparent"
    return (
        hex_to_rgba(settings.text_background_color, settings.text_background_opacity)
        or DEFAULT_TEXT_BACKGROUND
    )


def caption_style(settings: DisplaySettingsFields, scale: Scale = FULL) -> dict:
    return {
        "fontFamily": settings.caption_font_family,
        "color": settings.caption_font_color,
        "backgroundColor": settings.caption_bg_color,
        "fontSize": px(scale.font(settings.caption_font_size)),
        "padding": px(scale.padding(settings.text_padding)),
        "textAlign": settings.text_alignment,
        "maxWidth": max_width(settings.text_max_width),
    }


def info_styles(settings: DisplaySettingsFields, scale: Scale = FULL) -> tuple[dict, dict]:
    """Styles for the submitter line and the date line of the info block."""
    base = {"fontFamily": settings.font_family, "color": settings.font_color}
    name = {**base, "fontSize": px(scale.font(settings.font_size - 2)), "fontWeight": "bold"}
    date = {**base, "fontSize": px(scale.font(settings.font_size - 4)), "opacity": 0.8}
    return name, date


def text_block_style(settings: DisplaySettingsFields, scale: Scale = FULL) -> dict:
    return {
        "backgroundColor": text_background(settings),
        "fontFamily": settings.font_family,
        "color": settings.font_color,
        "fontSize": px(scale.font(settings.font_size)),
        "padding": px(scale.padding(settings.text_padding)),
        "maxWidth": max_width(settings.text_max_width),
        "textAlign": settings.text_alignment,
    }
