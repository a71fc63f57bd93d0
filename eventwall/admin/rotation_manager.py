import logging

from eventwall.client import ApiError, EventWallClient
from eventwall.schemas.photo import DisplayImage

logger = logging.getLogger(__name__)


class RotationManager:
    """Reorders the approved photos shown in the display rotation."""

    def __init__(self, client: EventWallClient):
        self._client = client
        self.images: list[DisplayImage] = []
        self.error: str | None = None

    async def load(self) -> None:
        try:
            self.images = await self._client.display_images()
            self.error = None
        except ApiError as e:
            self.error = e.message

    def _index_of(self, photo_id: int) -> int:
        index = next((i for i, img in enumerate(self.images) if img.id == photo_id), None)
        if index is None:
            raise KeyError(photo_id)
        return index

    async def move(self, photo_id: int, new_index: int) -> bool:
        """Move a photo to ``new_index`` and persist the whole order as 0..n-1."""
        old_index = self._index_of(photo_id)
        new_index = min(max(new_index, 0), len(self.images) - 1)
        if new_index == old_index:
            return True

        previous = list(self.images)
        moved = self.images.pop(old_index)
        self.images.insert(new_index, moved)

        try:
            await self._client.reorder([(img.id, i) for i, img in enumerate(self.images)])
        except ApiError as e:
            logger.warning("Reorder failed: %s", e.message)
            self.images = previous
            self.error = e.message
            return False

        self.error = None
        self.images = [img.model_copy(update={"display_order": i}) for i, img in enumerate(self.images)]
        return True

    async def move_up(self, photo_id: int) -> bool:
        index = self._index_of(photo_id)
        return await self.move(photo_id, index - 1)

    async def move_down(self, photo_id: int) -> bool:
        index = self._index_of(photo_id)
        return await self.move(photo_id, index + 1)
