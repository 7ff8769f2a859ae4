"""Progress Routes: listing only; entries are append-only and not editable here."""

from fastapi import APIRouter, Depends, Request, Security

from fitness_api.api.dependencies import api_key_scheme, get_progress_store
from fitness_api.api.responses import to_response
from fitness_api.models.progress import Progress
from fitness_api.schemas.common import ERROR_RESPONSES
from fitness_api.schemas.progress import ProgressRead
from fitness_api.services.record_store import RecordStore

router = APIRouter(
    prefix="/api/v1/progress",
    tags=["progress"],
    dependencies=[Security(api_key_scheme)],
    responses=ERROR_RESPONSES,
)


@router.get("", response_model=list[ProgressRead])
async def list_progress(
    request: Request,
    store: RecordStore[Progress] = Depends(get_progress_store),
):
    """Get all progress records, newest first."""
    outcome = await store.list_newest()
    return to_response(outcome, request, schema=ProgressRead)
