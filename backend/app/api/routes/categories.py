from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Path, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.uploads import form_payload, read_image_upload
from app.core.db import get_session
from app.core.deps import get_uploader
from app.core.rate_limit import upload_rate_limit
from app.core.responses import as_json_response
from app.schemas.category import CategoryCreate
from app.services.category_service import add_category, get_all_categories
from app.services.subcategory_service import delete_subcategory, get_subcategories
from app.services.uploader import AssetUploader

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("")
@upload_rate_limit
async def create_category(
    request: Request,
    name: Annotated[str, Form(...)],
    file: Annotated[UploadFile, File(...)],
    session: AsyncSession = Depends(get_session),
    uploader: AssetUploader = Depends(get_uploader),
):
    """Create a category with its icon; the slug is derived from the name."""
    payload = form_payload(CategoryCreate, name=name)
    icon = await read_image_upload(file)
    return as_json_response(await add_category(session, payload, icon, uploader))


@router.get("")
async def list_categories(session: AsyncSession = Depends(get_session)):
    return as_json_response(await get_all_categories(session))


@router.get("/{category_id}/subcategories")
async def list_subcategories(
    category_id: int = Path(..., gt=0),
    session: AsyncSession = Depends(get_session),
):
    return as_json_response(await get_subcategories(session, category_id))


@router.delete("/{category_id}/subcategories/{subcategory_id}")
async def remove_subcategory(
    category_id: int = Path(..., gt=0),
    subcategory_id: int = Path(..., gt=0),
    session: AsyncSession = Depends(get_session),
):
    return as_json_response(
        await delete_subcategory(session, category_id, subcategory_id)
    )
