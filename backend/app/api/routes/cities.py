from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.core.responses import as_json_response
from app.schemas.city import CityCreate
from app.services.city_service import add_city, get_all_cities

router = APIRouter(prefix="/cities", tags=["cities"])


@router.post("")
async def create_city(
    payload: CityCreate,
    session: AsyncSession = Depends(get_session),
):
    return as_json_response(await add_city(session, payload))


@router.get("")
async def list_cities(
    country_id: int = Query(..., gt=0),
    state_id: int = Query(..., gt=0),
    session: AsyncSession = Depends(get_session),
):
    return as_json_response(await get_all_cities(session, country_id, state_id))
