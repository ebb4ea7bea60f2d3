from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.country import Country
from app.schemas.common import ResponseDto
from app.schemas.country import CountryCreate, CountryOut
from app.services.base import ServiceError, ensure_valid_image, run_operation, write_with_asset
from app.services.text import title_case
from app.services.uploader import AssetUploader, UploadedAsset
from app.utils.security import ImageUpload


async def require_country(session: AsyncSession, country_id: int) -> None:
    found = await session.scalar(
        select(Country.country_id).where(Country.country_id == country_id)
    )
    if found is None:
        raise ServiceError(400, "COUNTRY_NOT_PRESENT")


async def _ensure_name_free(session: AsyncSession, name: str) -> None:
    existing = await session.scalar(select(Country.country_id).where(Country.name == name))
    if existing is not None:
        raise ServiceError(400, "COUNTRY_ALREADY_EXISTS")


async def add_country(
    session: AsyncSession,
    payload: CountryCreate,
    flag: ImageUpload,
    uploader: AssetUploader,
) -> ResponseDto:
    name = title_case(payload.name)

    async def _write(asset: UploadedAsset) -> CountryOut:
        await _ensure_name_free(session, name)
        country = Country(name=name, flag=asset.url)
        session.add(country)
        await session.flush()
        if country.country_id is None:
            raise ServiceError(400, "COUNTRY_CREATION_FAILED")
        return CountryOut.model_validate(country)

    async def _create() -> CountryOut:
        ensure_valid_image(flag)
        await _ensure_name_free(session, name)
        return await write_with_asset(
            session, uploader, flag, settings.COUNTRY_FLAG_FOLDER, _write
        )

    return await run_operation(
        session,
        _create,
        name="add_country",
        success_key="COUNTRY_CREATED_SUCCESSFULLY",
        duplicate_key="COUNTRY_ALREADY_EXISTS",
    )


async def get_all_countries(session: AsyncSession) -> ResponseDto:
    async def _list() -> list[CountryOut]:
        rows = (await session.scalars(select(Country).order_by(Country.country_id))).all()
        if not rows:
            raise ServiceError(400, "NO_COUNTRY_FOUND")
        return [CountryOut.model_validate(row) for row in rows]

    return await run_operation(
        session, _list, name="get_all_countries", success_key="COUNTRY_FOUND"
    )
