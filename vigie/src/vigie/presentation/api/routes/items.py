"""
Item API routes.

- GET /items            - List items (q, limit)
- GET /items/{item_id}  - Single item
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from vigie.application.use_cases import GetItem, ListItems
from vigie.di.dependencies import get_get_item, get_list_items

router = APIRouter(prefix="/items", tags=["items"])


@router.get("")
def list_items(
    q: Optional[str] = Query(default=None, description="Name substring"),
    limit: Optional[int] = Query(default=None, ge=0, description="Max items"),
    use_case: ListItems = Depends(get_list_items),
):
    """List items from the local data file."""
    return use_case.execute(q=q, limit=limit)


@router.get("/{item_id}")
def get_item(item_id: int, use_case: GetItem = Depends(get_get_item)):
    """Get one item by its numeric id."""
    return use_case.execute(item_id)
