"""Render models for the slideshow and the settings preview.

A :class:`Frame` is a plain dataclass tree. Rendering is a pure function of
its inputs, so the same settings, images and index always produce an equal
frame.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from eventwall.display import styles
from eventwall.display.rotation import Direction
from eventwall.display.transitions import TransitionSpec, transition_for
from eventwall.schemas.display_settings import DEFAULT_DISPLAY_FORMAT, DisplaySettingsFields
from eventwall.schemas.photo import DisplayImage

DEFAULT_LAYOUT = DEFAULT_DISPLAY_FORMAT
GRID_LAYOUT = "16:9-multiple"
TEXT_LAYOUT = "text-only"
LAYOUTS = (DEFAULT_LAYOUT, GRID_LAYOUT, TEXT_LAYOUT)
GRID_SIZE = 4

LOADING_MESSAGE = "Loading presentation..."
EMPTY_TITLE = "No approved posts available"
EMPTY_SUBTITLE = "Upload photos or messages by scanning the QR code"
TEXT_HEADING = "Welcome to the Event"
TEXT_BODY = "This is a text-only display format. You can customize this text in the display settings."


@dataclass(frozen=True)
class Caption:
    text: str
    position: str
    detached: bool
    style: dict = field(default_factory=dict)


@dataclass(frozen=True)
class InfoBlock:
    submitter: str
    date: str
    name_style: dict = field(default_factory=dict)
    date_style: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Slide:
    image_id: int
    src: str
    alt: str
    caption: Caption | None = None
    info: InfoBlock | None = None
    transition: TransitionSpec | None = None
    container_style: dict = field(default_factory=dict)
    frame_style: dict = field(default_factory=dict)


@dataclass(frozen=True)
class TextBlock:
    heading: str
    body: str
    style: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ControlsState:
    visible: bool
    paused: bool
    position: int
    total: int
    interval: int
    interval_choices: tuple[int, ...]


@dataclass(frozen=True)
class Frame:
    """One render of the display: a layout variant or a status frame."""

    variant: str
    slides: tuple[Slide, ...] = ()
    text: TextBlock | None = None
    message: str | None = None
    detail: str | None = None
    background: dict = field(default_factory=dict)
    logo: str | None = None
    index: int = 0
    total: int = 0
    controls: ControlsState | None = None


def format_date(created_at: str) -> str:
    try:
        value = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    except ValueError:
        return created_at
    return f"{value:%B} {value.day}, {value.year}"


def resolve_variant(display_format: str | None) -> str:
    return display_format if display_format in LAYOUTS else DEFAULT_LAYOUT


def _caption(image: DisplayImage, settings: DisplaySettingsFields, scale: styles.Scale) -> Caption | None:
    if not settings.show_captions or not image.caption:
        return None
    return Caption(
        text=image.caption,
        position=settings.text_position,
        detached=settings.separate_captions,
        style=styles.caption_style(settings, scale),
    )


def _info(image: DisplayImage, settings: DisplaySettingsFields, scale: styles.Scale) -> InfoBlock | None:
    if not settings.show_info:
        return None
    name_style, date_style = styles.info_styles(settings, scale)
    return InfoBlock(
        submitter=f"By: {image.submitter_name or 'Anonymous'}",
        date=format_date(image.created_at),
        name_style=name_style,
        date_style=date_style,
    )


def _single(
    settings: DisplaySettingsFields,
    images: Sequence[DisplayImage],
    index: int,
    direction: Direction,
    scale: styles.Scale,
) -> tuple[Slide, ...]:
    image = images[index]
    return (
        Slide(
            image_id=image.id,
            src=image.original_path,
            alt=f"Photo by {image.submitter_name}",
            caption=_caption(image, settings, scale),
            info=_info(image, settings, scale),
            transition=transition_for(settings.transition_effect, direction),
            container_style=styles.image_alignment(settings.image_position),
            frame_style=styles.border_style(settings, scale),
        ),
    )


def _grid(settings: DisplaySettingsFields, images: Sequence[DisplayImage], scale: styles.Scale) -> tuple[Slide, ...]:
    return tuple(
        Slide(
            image_id=image.id,
            src=image.original_path,
            alt=f"Photo by {image.submitter_name}",
            caption=_caption(image, settings, scale),
            frame_style=styles.border_style(settings, scale),
        )
        for image in images[:GRID_SIZE]
    )


def render_layout(
    settings: DisplaySettingsFields,
    images: Sequence[DisplayImage],
    index: int = 0,
    direction: Direction = Direction.FORWARD,
    scale: styles.Scale = styles.FULL,
) -> Frame:
    """Render the layout variant selected by ``settings.display_format``.

    ``images`` must be non-empty for the image variants and ``index`` in range.
    """
    variant = resolve_variant(settings.display_format)
    common = {
        "background": styles.background_style(settings),
        "logo": settings.logo_path,
        "index": index,
        "total": len(images),
    }

    if variant == TEXT_LAYOUT:
        text = TextBlock(
            heading=TEXT_HEADING,
            body=TEXT_BODY,
            style=styles.text_block_style(settings, scale),
        )
        return Frame(variant=variant, text=text, **common)

    if variant == GRID_LAYOUT:
        return Frame(variant=variant, slides=_grid(settings, images, scale), **common)

    return Frame(variant=variant, slides=_single(settings, images, index, direction, scale), **common)


def loading_frame() -> Frame:
    return Frame(variant="loading", message=LOADING_MESSAGE)


def empty_frame(settings: DisplaySettingsFields | None = None) -> Frame:
    return Frame(
        variant="empty",
        message=EMPTY_TITLE,
        detail=EMPTY_SUBTITLE,
        background=styles.background_style(settings),
        logo=settings.logo_path if settings else None,
    )


def error_frame(message: str, settings: DisplaySettingsFields | None = None) -> Frame:
    return Frame(
        variant="error",
        message=f"Error loading images: {message}",
        background=styles.background_style(settings),
        logo=settings.logo_path if settings else None,
    )
