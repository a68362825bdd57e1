"""
Item service: direct read/write/delete of store keys.
"""
from typing import Optional

from kvgate.database.store import KeyValueStore
from kvgate.models.item import Item


class ItemService:
    """Service for item CRUD. Items never expire."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def create_item(self, item_id: str, value: str) -> Item:
        """Store an item, overwriting any existing value at the same key."""
        await self.store.set(item_id, value)
        return Item(id=item_id, value=value)

    async def get_item(self, item_id: str) -> Optional[Item]:
        """
        Get an item by id.

        Returns:
            Item, or None if the key does not exist

        Raises:
            StoreError: If the store fails
        """
        value = await self.store.get(item_id)
        if value is None:
            return None
        return Item(id=item_id, value=value)

    async def update_item(self, item_id: str, value: str) -> Item:
        """Overwrite an item. Creates it if it does not exist."""
        await self.store.set(item_id, value)
        return Item(id=item_id, value=value)

    async def delete_item(self, item_id: str) -> None:
        """Delete an item. Missing items are not an error."""
        await self.store.delete(item_id)
