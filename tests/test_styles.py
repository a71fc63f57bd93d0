import pytest

from eventwall.display import styles
from eventwall.schemas.display_settings import DisplaySettingsFields


@pytest.mark.parametrize(
    "color, opacity, expected",
    [
        ("#000000", 50, "rgba(0,0,0,0.5)"),
        ("ff8000", 100, "rgba(255,128,0,1)"),
        ("#FFFFFF", 0, "rgba(255,255,255,0)"),
        ("#1a2B3c", 25, "rgba(26,43,60,0.25)"),
    ],
)
def test_hex_to_rgba(color, opacity, expected):
    assert styles.hex_to_rgba(color, opacity) == expected


@pytest.mark.parametrize("color", ["", None, "#fff", "#gggggg", "rgb(0,0,0)", "#0000000"])
def test_hex_to_rgba_invalid_returns_none(color):
    assert styles.hex_to_rgba(color, 50) is None


def test_text_background_falls_back_on_bad_color():
    settings = DisplaySettingsFields(text_background_color="navy")
    assert styles.text_background(settings) == styles.DEFAULT_TEXT_BACKGROUND


def test_text_background_disabled_is_transparent():
    settings = DisplaySettingsFields(text_background=False)
    assert styles.text_background(settings) == "transparent"


@pytest.mark.parametrize(
    "value, expected",
    [("full", "100%"), ("3/4", "75%"), ("1/2", "50%"), ("1/3", "33.333%")],
)
def test_max_width(value, expected):
    assert styles.max_width(value) == expected


def test_image_alignment():
    assert styles.image_alignment("top")["alignItems"] == "flex-start"
    assert styles.image_alignment("right")["justifyContent"] == "flex-end"
    assert styles.image_alignment("bogus") == styles.image_alignment("center")


def test_border_style():
    assert styles.border_style(DisplaySettingsFields()) == {"borderWidth": "0px"}
    settings = DisplaySettingsFields(border_style="dashed", border_width=5, border_color="#ff0000")
    assert styles.border_style(settings) == {
        "borderStyle": "dashed",
        "borderWidth": "5px",
        "borderColor": "#ff0000",
    }
    assert styles.border_style(settings, styles.PREVIEW)["borderWidth"] == "2.5px"


def test_preview_scale_halves_with_floors():
    settings = DisplaySettingsFields(font_size=40, text_padding=3, caption_font_size=12)
    full = styles.text_block_style(settings)
    preview = styles.text_block_style(settings, styles.PREVIEW)

    assert full["fontSize"] == "40px"
    assert preview["fontSize"] == "20px"
    assert preview["padding"] == "2px"
    assert styles.caption_style(settings, styles.PREVIEW)["fontSize"] == "8px"


def test_background_style():
    assert styles.background_style(None) == {"backgroundColor": "white"}
    bg = styles.background_style(DisplaySettingsFields(background_path="/uploads/bg.jpg"))
    assert bg["backgroundImage"] == "url(/uploads/bg.jpg)"
    assert bg["backgroundSize"] == "cover"


def test_derivations_are_pure():
    settings = DisplaySettingsFields(font_size=30, text_max_width="1/3")
    assert styles.text_block_style(settings) == styles.text_block_style(settings)
    assert styles.info_styles(settings, styles.PREVIEW) == styles.info_styles(settings, styles.PREVIEW)
