"""
Statistics API routes.
Provides aggregate counts over the local item data.
"""

from fastapi import APIRouter, Depends

from vigie.application.use_cases import GetItemStats
from vigie.di.dependencies import get_get_item_stats

router = APIRouter(tags=["stats"])


@router.get("/stats")
def get_stats(use_case: GetItemStats = Depends(get_get_item_stats)):
    """
    Get item statistics.

    Always answers 200; an unreadable data file is reported as zero items
    with an explanatory note.
    """
    return {"success": True, "stats": use_case.execute().to_dict()}
