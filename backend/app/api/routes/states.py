from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.core.responses import as_json_response
from app.schemas.state import StateCreate
from app.services.state_service import add_state, get_all_states, get_states_grouped

router = APIRouter(prefix="/states", tags=["states"])


@router.post("")
async def create_state(
    payload: StateCreate,
    session: AsyncSession = Depends(get_session),
):
    return as_json_response(await add_state(session, payload))


@router.get("")
async def list_states(
    country_id: Optional[int] = Query(None, gt=0),
    session: AsyncSession = Depends(get_session),
):
    return as_json_response(await get_all_states(session, country_id))


@router.get("/grouped")
async def list_states_grouped(session: AsyncSession = Depends(get_session)):
    """States grouped per country as ``{country, states, shortnames}`` entries."""
    return as_json_response(await get_states_grouped(session))
