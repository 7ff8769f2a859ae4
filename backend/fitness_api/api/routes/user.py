"""User Routes: listing only."""

from fastapi import APIRouter, Depends, Request, Security

from fitness_api.api.dependencies import api_key_scheme, get_user_store
from fitness_api.api.responses import to_response
from fitness_api.models.user import User
from fitness_api.schemas.common import ERROR_RESPONSES
from fitness_api.schemas.user import UserRead
from fitness_api.services.record_store import RecordStore

router = APIRouter(
    prefix="/api/v1/user",
    tags=["user"],
    dependencies=[Security(api_key_scheme)],
    responses=ERROR_RESPONSES,
)


@router.get("", response_model=list[UserRead])
async def list_users(
    request: Request,
    store: RecordStore[User] = Depends(get_user_store),
):
    """Get all users, newest first."""
    outcome = await store.list_newest()
    return to_response(outcome, request, schema=UserRead)
