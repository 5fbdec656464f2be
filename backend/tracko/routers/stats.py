from fastapi import APIRouter, Depends, HTTPException
from tracko.dependencies import get_store
from tracko.schemas.stats import ProcessingStatsResponse
from tracko.services.entity_store import EntityStore

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=ProcessingStatsResponse)
def get_stats(store: EntityStore = Depends(get_store)):
    """Dashboard processing stats"""
    stats = store.stats.get()
    if not stats:
        raise HTTPException(status_code=404, detail="Stats not found")
    return stats
