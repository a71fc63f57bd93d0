from eventwall.models.event import Event
from eventwall.models.photo import Photo
from eventwall.models.display_settings import DisplaySettings
from eventwall.models.analytics import Analytics
from eventwall.models.user import User

__all__ = ["Event", "Photo", "DisplaySettings", "Analytics", "User"]
