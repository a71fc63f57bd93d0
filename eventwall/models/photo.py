from sqlalchemy import Column, Integer, String, ForeignKey

from eventwall.database import Base
from eventwall.utils.timestamps import utc_now_iso


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    original_path = Column(String, nullable=False)
    submitter_name = Column(String, nullable=True)
    caption = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pending", index=True)
    display_order = Column(Integer, nullable=True)  # NULL = not placed yet, sorts last
    created_at = Column(String, nullable=False, default=utc_now_iso)
