"""
Item router: create, read, update and delete string items.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from kvgate.core.exceptions import StoreError
from kvgate.dependencies.services import get_item_service
from kvgate.models.item import Item
from kvgate.schemas.item import ItemBody
from kvgate.services.item_service import ItemService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["Items"])


@router.post(
    "",
    response_model=ItemBody,
    status_code=status.HTTP_201_CREATED,
    summary="Create an item",
)
async def create_item(
    body: ItemBody,
    item_service: ItemService = Depends(get_item_service),
):
    """Store `value` under `id` with no expiration and echo the body."""
    try:
        await item_service.create_item(body.id, body.value)
    except StoreError as e:
        logger.error("Failed to store item: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error storing item",
        )
    return body


@router.get(
    "/{item_id}",
    response_model=Item,
    summary="Get an item",
)
async def get_item(
    item_id: str,
    item_service: ItemService = Depends(get_item_service),
):
    """Get an item by id."""
    try:
        item = await item_service.get_item(item_id)
    except StoreError as e:
        logger.error("Failed to retrieve item: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error retrieving item",
        )

    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="item not found",
        )
    return item


@router.put(
    "/{item_id}",
    response_model=ItemBody,
    summary="Update an item",
)
async def update_item(
    item_id: str,
    body: ItemBody,
    item_service: ItemService = Depends(get_item_service),
):
    """
    Overwrite the value stored under the path `item_id` and echo the body.

    The item is created if it does not exist.
    """
    try:
        await item_service.update_item(item_id, body.value)
    except StoreError as e:
        logger.error("Failed to update item: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error updating item",
        )
    return body


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an item",
)
async def delete_item(
    item_id: str,
    item_service: ItemService = Depends(get_item_service),
):
    """Delete an item. Succeeds even if the item never existed."""
    try:
        await item_service.delete_item(item_id)
    except StoreError as e:
        logger.error("Failed to delete item: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error deleting item",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
