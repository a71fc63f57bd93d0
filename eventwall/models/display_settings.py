from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from eventwall.database import Base
from eventwall.utils.timestamps import utc_now_iso


class DisplaySettings(Base):
    __tablename__ = "display_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, unique=True)
    background_path = Column(String, nullable=True)
    logo_path = Column(String, nullable=True)
    display_format = Column(String, nullable=False, default="16:9-default")
    auto_rotate = Column(Boolean, nullable=False, default=True)
    slide_interval = Column(Integer, nullable=False, default=8)
    show_info = Column(Boolean, nullable=False, default=True)
    show_captions = Column(Boolean, nullable=False, default=True)
    separate_captions = Column(Boolean, nullable=False, default=False)
    transition_effect = Column(String, nullable=False, default="slide")
    blacklist_words = Column(String, nullable=True)
    border_style = Column(String, nullable=False, default="none")
    border_width = Column(Integer, nullable=False, default=0)
    border_color = Column(String, nullable=False, default="#ffffff")
    font_family = Column(String, nullable=False, default="Arial")
    font_color = Column(String, nullable=False, default="#ffffff")
    font_size = Column(Integer, nullable=False, default=16)
    image_position = Column(String, nullable=False, default="center")
    caption_bg_color = Column(String, nullable=False, default="rgba(0,0,0,0.5)")
    caption_font_family = Column(String, nullable=False, default="Arial")
    caption_font_color = Column(String, nullable=False, default="#ffffff")
    caption_font_size = Column(Integer, nullable=False, default=14)
    text_position = Column(String, nullable=False, default="overlay-bottom")
    text_alignment = Column(String, nullable=False, default="center")
    text_padding = Column(Integer, nullable=False, default=10)
    text_max_width = Column(String, nullable=False, default="full")
    text_background = Column(Boolean, nullable=False, default=True)
    text_background_color = Column(String, nullable=False, default="#000000")
    text_background_opacity = Column(Integer, nullable=False, default=50)
    updated_at = Column(String, nullable=False, default=utc_now_iso, onupdate=utc_now_iso)
