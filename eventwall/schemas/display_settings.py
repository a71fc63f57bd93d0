from typing import Literal

from pydantic import Field

from eventwall.schemas.base import CamelModel

TransitionEffect = Literal["slide", "fade", "zoom", "flip"]
BorderStyle = Literal["none", "solid", "dashed", "dotted", "double"]
FontFamily = Literal["Arial", "Helvetica", "Verdana", "Georgia", "Times New Roman", "Courier New"]
ImagePosition = Literal["center", "top", "bottom", "left", "right"]
TextPosition = Literal[
    "overlay-bottom",
    "overlay-top",
    "below-image",
    "above-image",
    "left-of-image",
    "right-of-image",
]
TextAlignment = Literal["left", "center", "right"]
TextMaxWidth = Literal["full", "3/4", "1/2", "1/3"]

DEFAULT_DISPLAY_FORMAT = "16:9-default"


class DisplaySettingsFields(CamelModel):
    background_path: str | None = None
    logo_path: str | None = None
    display_format: str = DEFAULT_DISPLAY_FORMAT
    auto_rotate: bool = True
    slide_interval: int = Field(default=8, ge=1, le=60)
    show_info: bool = True
    show_captions: bool = True
    separate_captions: bool = False
    transition_effect: TransitionEffect = "slide"
    blacklist_words: str | None = None
    border_style: BorderStyle = "none"
    border_width: int = Field(default=0, ge=0, le=20)
    border_color: str = "#ffffff"
    font_family: FontFamily = "Arial"
    font_color: str = "#ffffff"
    font_size: int = Field(default=16, ge=8, le=72)
    image_position: ImagePosition = "center"
    caption_bg_color: str = "rgba(0,0,0,0.5)"
    caption_font_family: FontFamily = "Arial"
    caption_font_color: str = "#ffffff"
    caption_font_size: int = Field(default=14, ge=8, le=72)
    text_position: TextPosition = "overlay-bottom"
    text_alignment: TextAlignment = "center"
    text_padding: int = Field(default=10, ge=0, le=50)
    text_max_width: TextMaxWidth = "full"
    text_background: bool = True
    text_background_color: str = "#000000"
    text_background_opacity: int = Field(default=50, ge=0, le=100)

    def blacklist(self) -> list[str]:
        if not self.blacklist_words:
            return []
        return [w.strip().lower() for w in self.blacklist_words.split(",") if w.strip()]


class DisplaySettingsPayload(DisplaySettingsFields):
    event_id: int


class DisplaySettingsResponse(DisplaySettingsFields):
    """Stored settings; ``id`` and ``updated_at`` are None for unsaved defaults."""

    id: int | None = None
    event_id: int | None = None
    updated_at: str | None = None


SETTINGS_FIELDS: tuple[str, ...] = tuple(DisplaySettingsFields.model_fields)
