"""Debug view of the whole database document, only served in debug mode"""

from fastapi import APIRouter, Depends, HTTPException

from ..core.config import Settings, get_settings
from ..database.document import JsonDocument
from ..dependencies import get_database

router = APIRouter(prefix="/api/debug", tags=["Debug"])


@router.get("/db")
def dump_database(
    settings: Settings = Depends(get_settings),
    document: JsonDocument = Depends(get_database),
):
    if not settings.debug:
        raise HTTPException(status_code=404, detail="Not Found")
    return document.read()
