from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.category import Category
from app.schemas.category import CategoryCreate, CategoryOut
from app.schemas.common import ResponseDto
from app.services.base import ServiceError, ensure_valid_image, run_operation, write_with_asset
from app.services.text import make_slug, title_case
from app.services.uploader import AssetUploader, UploadedAsset
from app.utils.security import ImageUpload


async def require_category(session: AsyncSession, category_id: int) -> None:
    found = await session.scalar(
        select(Category.category_id).where(Category.category_id == category_id)
    )
    if found is None:
        raise ServiceError(400, "CATEGORY_NOT_FOUND")


async def _ensure_name_free(session: AsyncSession, name: str) -> None:
    existing = await session.scalar(
        select(Category.category_id).where(Category.name == name)
    )
    if existing is not None:
        raise ServiceError(400, "CATEGORY_ALREADY_EXISTS")


async def add_category(
    session: AsyncSession,
    payload: CategoryCreate,
    icon: ImageUpload,
    uploader: AssetUploader,
) -> ResponseDto:
    name = title_case(payload.name)
    # The slug comes from the raw name, not the title-cased one.
    slug = make_slug(payload.name)

    async def _write(asset: UploadedAsset) -> CategoryOut:
        await _ensure_name_free(session, name)
        category = Category(name=name, slug=slug, icon=asset.url)
        session.add(category)
        await session.flush()
        if category.category_id is None:
            raise ServiceError(400, "CATEGORY_CREATION_FAILED")
        return CategoryOut.model_validate(category)

    async def _create() -> CategoryOut:
        ensure_valid_image(icon)
        await _ensure_name_free(session, name)
        return await write_with_asset(
            session, uploader, icon, settings.CATEGORY_ICON_FOLDER, _write
        )

    return await run_operation(
        session,
        _create,
        name="add_category",
        success_key="CATEGORY_CREATED_SUCCESSFULLY",
        duplicate_key="CATEGORY_ALREADY_EXISTS",
    )


async def get_all_categories(session: AsyncSession) -> ResponseDto:
    async def _list() -> list[CategoryOut]:
        rows = (
            await session.scalars(select(Category).order_by(Category.category_id))
        ).all()
        if not rows:
            raise ServiceError(400, "CATEGORY_NOT_FOUND")
        return [CategoryOut.model_validate(row) for row in rows]

    return await run_operation(
        session, _list, name="get_all_categories", success_key="CATEGORY_FOUND"
    )
