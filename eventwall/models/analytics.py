from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint

from eventwall.database import Base


class Analytics(Base):
    __tablename__ = "analytics"
    __table_args__ = (UniqueConstraint("event_id", "date", name="uq_analytics_event_day"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    date = Column(String, nullable=False)  # YYYY-MM-DD
    uploads = Column(Integer, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0)
    qr_scans = Column(Integer, nullable=False, default=0)
    approved = Column(Integer, nullable=False, default=0)
    rejected = Column(Integer, nullable=False, default=0)
    archived = Column(Integer, nullable=False, default=0)
