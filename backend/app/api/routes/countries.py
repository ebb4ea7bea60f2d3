from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.uploads import form_payload, read_image_upload
from app.core.db import get_session
from app.core.deps import get_uploader
from app.core.rate_limit import upload_rate_limit
from app.core.responses import as_json_response
from app.schemas.country import CountryCreate
from app.services.country_service import add_country, get_all_countries
from app.services.uploader import AssetUploader

router = APIRouter(prefix="/countries", tags=["countries"])


@router.post("")
@upload_rate_limit
async def create_country(
    request: Request,
    name: Annotated[str, Form(...)],
    file: Annotated[UploadFile, File(...)],
    session: AsyncSession = Depends(get_session),
    uploader: AssetUploader = Depends(get_uploader),
):
    """Create a country with its flag image (jpg, jpeg or png)."""
    payload = form_payload(CountryCreate, name=name)
    flag = await read_image_upload(file)
    return as_json_response(await add_country(session, payload, flag, uploader))


@router.get("")
async def list_countries(session: AsyncSession = Depends(get_session)):
    return as_json_response(await get_all_countries(session))
