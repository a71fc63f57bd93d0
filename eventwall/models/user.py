from sqlalchemy import Column, Integer, String

from eventwall.database import Base
from eventwall.utils.timestamps import utc_now_iso


class User(Base):
    """Admin account row; login flows live outside this service."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(String, nullable=False, default=utc_now_iso)
