from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.city import City
from app.schemas.city import CityCreate, CityOut, CityWithParentsOut
from app.schemas.common import ResponseDto
from app.services.base import ServiceError, run_operation
from app.services.country_service import require_country
from app.services.state_service import require_state_in_country


async def add_city(session: AsyncSession, payload: CityCreate) -> ResponseDto:
    async def _create() -> CityOut:
        async with session.begin():
            await require_country(session, payload.country_id)
            await require_state_in_country(session, payload.state_id, payload.country_id)
            city = City(**payload.model_dump())
            session.add(city)
            await session.flush()
            if city.city_id is None:
                raise ServiceError(400, "CITY_CREATION_FAILED")
            return CityOut.model_validate(city)

    return await run_operation(
        session, _create, name="add_city", success_key="CITY_CREATED_SUCCESSFULLY"
    )


async def get_all_cities(
    session: AsyncSession, country_id: int, state_id: int
) -> ResponseDto:
    async def _list() -> list[CityWithParentsOut]:
        await require_country(session, country_id)
        await require_state_in_country(session, state_id, country_id)

        stmt = (
            select(City)
            .options(joinedload(City.country), joinedload(City.state))
            .where(City.country_id == country_id, City.state_id == state_id)
            .order_by(City.city_id)
        )
        rows = (await session.scalars(stmt)).all()
        if not rows:
            raise ServiceError(400, "NO_CITIES_PRESENT")
        return [CityWithParentsOut.model_validate(row) for row in rows]

    return await run_operation(
        session, _list, name="get_all_cities", success_key="CITIES_FOUND"
    )
