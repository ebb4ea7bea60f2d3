from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.uploads import form_payload, read_image_upload
from app.core.db import get_session
from app.core.deps import get_uploader
from app.core.rate_limit import upload_rate_limit
from app.core.responses import as_json_response
from app.schemas.subcategory import SubcategoryCreate
from app.services.subcategory_service import add_subcategory
from app.services.uploader import AssetUploader

router = APIRouter(prefix="/subcategories", tags=["subcategories"])


@router.post("")
@upload_rate_limit
async def create_subcategory(
    request: Request,
    category_id: Annotated[int, Form(...)],
    sub_category_name: Annotated[str, Form(...)],
    file: Annotated[UploadFile, File(...)],
    session: AsyncSession = Depends(get_session),
    uploader: AssetUploader = Depends(get_uploader),
):
    payload = form_payload(
        SubcategoryCreate, category_id=category_id, sub_category_name=sub_category_name
    )
    icon = await read_image_upload(file)
    return as_json_response(await add_subcategory(session, payload, icon, uploader))
