from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.country import Country
from app.models.state import State
from app.schemas.common import ResponseDto
from app.schemas.state import StateCreate, StateGroupOut, StateOut, StateWithCountryOut
from app.services.base import ServiceError, run_operation
from app.services.country_service import require_country


async def require_state_in_country(
    session: AsyncSession, state_id: int, country_id: int
) -> None:
    found = await session.scalar(
        select(State.state_id).where(
            State.state_id == state_id, State.country_id == country_id
        )
    )
    if found is None:
        raise ServiceError(400, "STATE_NOT_FOUND_OR_NOT_IN_COUNTRY")


async def add_state(session: AsyncSession, payload: StateCreate) -> ResponseDto:
    async def _create() -> StateOut:
        async with session.begin():
            await require_country(session, payload.country_id)
            state = State(**payload.model_dump())
            session.add(state)
            await session.flush()
            if state.state_id is None:
                raise ServiceError(400, "STATE_CREATION_FAILED")
            return StateOut.model_validate(state)

    return await run_operation(
        session, _create, name="add_state", success_key="STATE_CREATED_SUCCESSFULLY"
    )


async def get_all_states(
    session: AsyncSession, country_id: Optional[int] = None
) -> ResponseDto:
    async def _list() -> list[StateWithCountryOut]:
        stmt = select(State).options(joinedload(State.country)).order_by(State.state_id)
        if country_id is not None:
            stmt = stmt.where(State.country_id == country_id)
        rows = (await session.scalars(stmt)).all()
        if not rows:
            raise ServiceError(400, "NO_STATE_PRESENT")
        return [StateWithCountryOut.model_validate(row) for row in rows]

    return await run_operation(
        session, _list, name="get_all_states", success_key="STATES_ARE_PRESENT"
    )


def group_states_by_country(
    rows: Iterable[tuple[str, Optional[str], Optional[str]]],
) -> list[StateGroupOut]:
    """Collapse ``(country, state_name, short_name)`` rows into one entry per country.

    Countries keep the order in which they are first seen; within a country,
    repeated state and short names are kept once at their first position and
    empty values are skipped.
    """

    grouped: dict[str, tuple[dict[str, None], dict[str, None]]] = {}
    for country, state_name, short_name in rows:
        states, shortnames = grouped.setdefault(country, ({}, {}))
        if state_name:
            states.setdefault(state_name)
        if short_name:
            shortnames.setdefault(short_name)

    return [
        StateGroupOut(country=country, states=list(states), shortnames=list(shortnames))
        for country, (states, shortnames) in grouped.items()
    ]


async def get_states_grouped(session: AsyncSession) -> ResponseDto:
    async def _list() -> list[StateGroupOut]:
        stmt = (
            select(Country.name, State.state_name, State.short_name)
            .select_from(State)
            .join(State.country)
            .order_by(State.state_id)
        )
        rows = (await session.execute(stmt)).all()
        if not rows:
            raise ServiceError(400, "NO_STATE_PRESENT")
        return group_states_by_country(rows)

    return await run_operation(
        session, _list, name="get_states_grouped", success_key="STATES_ARE_PRESENT"
    )
