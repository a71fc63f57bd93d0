from eventwall.display import layouts
from eventwall.display.rotation import Direction
from eventwall.display.styles import PREVIEW
from eventwall.display.transitions import transition_for
from eventwall.schemas.display_settings import DisplaySettingsFields
from helpers import display_image

IMAGES = [display_image(i, caption=f"caption {i}") for i in range(1, 7)]


def test_default_layout_single_slide():
    frame = layouts.render_layout(DisplaySettingsFields(), IMAGES, 2)

    assert frame.variant == "16:9-default"
    assert frame.index == 2 and frame.total == 6
    [slide] = frame.slides
    assert slide.image_id == 3
    assert slide.caption.text == "caption 3"
    assert slide.caption.position == "overlay-bottom"
    assert slide.caption.detached is False
    assert slide.info.submitter == "By: Guest 3"
    assert slide.info.date == "May 1, 2024"
    assert slide.transition.effect == "slide"


def test_default_layout_honours_caption_and_info_flags():
    settings = DisplaySettingsFields(
        show_captions=False, show_info=False, text_position="left-of-image"
    )
    [slide] = layouts.render_layout(settings, IMAGES, 0).slides
    assert slide.caption is None
    assert slide.info is None

    settings = DisplaySettingsFields(separate_captions=True, text_position="above-image")
    [slide] = layouts.render_layout(settings, IMAGES, 0).slides
    assert slide.caption.detached is True
    assert slide.caption.position == "above-image"


def test_image_without_caption_has_no_caption_block():
    frame = layouts.render_layout(DisplaySettingsFields(), [display_image(1)], 0)
    assert frame.slides[0].caption is None


def test_grid_layout_takes_first_four():
    frame = layouts.render_layout(DisplaySettingsFields(display_format="16:9-multiple"), IMAGES, 5)

    assert frame.variant == "16:9-multiple"
    assert [s.image_id for s in frame.slides] == [1, 2, 3, 4]
    assert all(s.caption is not None for s in frame.slides)
    assert all(s.info is None for s in frame.slides)


def test_text_only_layout():
    settings = DisplaySettingsFields(
        display_format="text-only",
        text_background_color="#102030",
        text_background_opacity=40,
        text_max_width="1/2",
        text_padding=24,
    )
    frame = layouts.render_layout(settings, IMAGES, 0)

    assert frame.variant == "text-only"
    assert frame.slides == ()
    assert frame.text.heading == layouts.TEXT_HEADING
    assert frame.text.style["backgroundColor"] == "rgba(16,32,48,0.4)"
    assert frame.text.style["maxWidth"] == "50%"
    assert frame.text.style["padding"] == "24px"


def test_unknown_format_falls_back_to_default():
    frame = layouts.render_layout(DisplaySettingsFields(display_format="4:3-mosaic"), IMAGES, 0)
    assert frame.variant == "16:9-default"
    assert len(frame.slides) == 1


def test_render_is_idempotent():
    settings = DisplaySettingsFields(transition_effect="zoom", border_style="solid", border_width=4)
    first = layouts.render_layout(settings, IMAGES, 3, Direction.BACKWARD)
    second = layouts.render_layout(settings, IMAGES, 3, Direction.BACKWARD)
    assert first == second
    assert layouts.render_layout(settings, IMAGES, 3, scale=PREVIEW) == layouts.render_layout(
        settings, IMAGES, 3, scale=PREVIEW
    )


def test_status_frames():
    assert layouts.loading_frame().message == "Loading presentation..."
    empty = layouts.empty_frame()
    assert empty.message == "No approved posts available"
    assert empty.detail == "Upload photos or messages by scanning the QR code"
    error = layouts.error_frame("timeout")
    assert error.message == "Error loading images: timeout"


def test_format_date_passes_through_unparseable():
    assert layouts.format_date("yesterday") == "yesterday"
    assert layouts.format_date("2024-12-25T08:00:00Z") == "December 25, 2024"


def test_slide_transition_depends_on_direction():
    forward = transition_for("slide", Direction.FORWARD)
    backward = transition_for("slide", Direction.BACKWARD)
    assert forward.enter["x"] == 1000 and forward.exit["x"] == -1000
    assert backward.enter["x"] == -1000 and backward.exit["x"] == 1000
    assert forward.center == {"x": 0, "opacity": 1}


def test_transition_effects():
    assert transition_for("fade").timing == {"opacity": {"duration": 0.5}}
    assert transition_for("zoom").enter == {"scale": 0.8, "opacity": 0}
    assert transition_for("flip").exit == {"rotateY": -90, "opacity": 0}
    assert transition_for("wobble").effect == "slide"
