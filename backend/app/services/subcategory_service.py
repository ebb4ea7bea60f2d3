from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.subcategory import Subcategory
from app.schemas.common import ResponseDto
from app.schemas.subcategory import SubcategoryCreate, SubcategoryOut
from app.services.base import ServiceError, ensure_valid_image, run_operation, write_with_asset
from app.services.category_service import require_category
from app.services.uploader import AssetUploader, UploadedAsset
from app.utils.security import ImageUpload


async def add_subcategory(
    session: AsyncSession,
    payload: SubcategoryCreate,
    icon: ImageUpload,
    uploader: AssetUploader,
) -> ResponseDto:
    async def _write(asset: UploadedAsset) -> SubcategoryOut:
        await require_category(session, payload.category_id)
        subcategory = Subcategory(
            category_id=payload.category_id,
            sub_category_name=payload.sub_category_name,
            icon=asset.url,
        )
        session.add(subcategory)
        await session.flush()
        if subcategory.subcategory_id is None:
            raise ServiceError(400, "SUBCATEGORY_CREATION_FAILED")
        return SubcategoryOut.model_validate(subcategory)

    async def _create() -> SubcategoryOut:
        ensure_valid_image(icon)
        await require_category(session, payload.category_id)
        return await write_with_asset(
            session, uploader, icon, settings.CATEGORY_ICON_FOLDER, _write
        )

    return await run_operation(
        session,
        _create,
        name="add_subcategory",
        success_key="SUBCATEGORY_CREATED_SUCCESSFULLY",
    )


async def get_subcategories(session: AsyncSession, category_id: int) -> ResponseDto:
    async def _list() -> list[SubcategoryOut]:
        await require_category(session, category_id)
        rows = (
            await session.scalars(
                select(Subcategory)
                .where(Subcategory.category_id == category_id)
                .order_by(Subcategory.subcategory_id)
            )
        ).all()
        if not rows:
            raise ServiceError(400, "NO_SUBCATEGORY_PRESENT")
        return [SubcategoryOut.model_validate(row) for row in rows]

    return await run_operation(
        session, _list, name="get_subcategories", success_key="SUBCATEGORIES_FOUND"
    )


async def delete_subcategory(
    session: AsyncSession, category_id: int, subcategory_id: int
) -> ResponseDto:
    match = (
        Subcategory.subcategory_id == subcategory_id,
        Subcategory.category_id == category_id,
    )

    async def _delete() -> None:
        async with session.begin():
            found = await session.scalar(select(Subcategory.subcategory_id).where(*match))
            if found is None:
                raise ServiceError(404, "SUBCATEGORY_NOT_FOUND")

            result = await session.execute(delete(Subcategory).where(*match))
            if not result.rowcount:
                raise ServiceError(400, "SUBCATEGORY_DELETION_FAILED")
        return None

    return await run_operation(
        session,
        _delete,
        name="delete_subcategory",
        success_key="SUBCATEGORY_DELETED_SUCCESSFULLY",
    )
