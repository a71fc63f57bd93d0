from eventwall.admin.moderation import ModerationView, Page, SortOrder, paginate
from eventwall.admin.rotation_manager import RotationManager
from eventwall.admin.settings_form import SAMPLE_IMAGES, SettingsForm
from eventwall.admin.upload import UploadPage

__all__ = [
    "ModerationView",
    "Page",
    "SortOrder",
    "paginate",
    "RotationManager",
    "SAMPLE_IMAGES",
    "SettingsForm",
    "UploadPage",
]
