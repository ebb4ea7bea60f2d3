"""Category and subcategory operations, including composite-key deletion."""

import pytest
from sqlalchemy import delete as sa_delete

from app.core.messages import get_response_message
from app.models import Category, Subcategory
from app.schemas.category import CategoryCreate
from app.schemas.subcategory import SubcategoryCreate
from app.services import subcategory_service
from app.services.category_service import add_category, get_all_categories
from app.services.subcategory_service import (
    add_subcategory,
    delete_subcategory,
    get_subcategories,
)
from app.utils.security import ImageUpload
from fakes import FakeUploader, count_rows, jpeg_image

pytestmark = pytest.mark.anyio


async def _category(session, uploader, name="Home Appliances") -> int:
    resp = await add_category(session, CategoryCreate(name=name), jpeg_image(), uploader)
    assert resp.status_code == 200, resp.message
    return resp.data.category_id


async def _subcategory(session, uploader, category_id, name="Mixers") -> int:
    resp = await add_subcategory(
        session,
        SubcategoryCreate(category_id=category_id, sub_category_name=name),
        jpeg_image(),
        uploader,
    )
    assert resp.status_code == 200, resp.message
    return resp.data.subcategory_id


async def test_add_category_builds_name_slug_and_icon(session, uploader):
    resp = await add_category(
        session, CategoryCreate(name="home APPLIANCES"), jpeg_image(), uploader
    )

    assert resp.status_code == 200
    assert resp.message == get_response_message("CATEGORY_CREATED_SUCCESSFULLY")
    assert resp.data.name == "Home Appliances"
    assert resp.data.slug == "home-appliances"
    assert resp.data.icon.startswith("https://cdn.test/upload/")
    assert uploader.uploads == [("icon.jpg", "upload")]


async def test_duplicate_category_is_rejected(session, session_factory, uploader):
    await _category(session, uploader, "Toys")

    resp = await add_category(session, CategoryCreate(name="TOYS"), jpeg_image(), uploader)

    assert resp.status_code == 400
    assert resp.message == get_response_message("CATEGORY_ALREADY_EXISTS")
    assert await count_rows(session_factory, Category) == 1


async def test_failed_icon_upload_writes_no_category(session, session_factory):
    resp = await add_category(
        session, CategoryCreate(name="Toys"), jpeg_image(), FakeUploader(fail=True)
    )

    assert resp.status_code == 500
    assert await count_rows(session_factory, Category) == 0


async def test_list_categories(session, uploader):
    empty = await get_all_categories(session)
    assert empty.status_code == 400
    assert empty.message == get_response_message("CATEGORY_NOT_FOUND")

    await _category(session, uploader, "Toys")
    resp = await get_all_categories(session)
    assert resp.status_code == 200
    assert resp.message == get_response_message("CATEGORY_FOUND")
    assert [c.slug for c in resp.data] == ["toys"]


async def test_subcategory_requires_category(session, session_factory, uploader):
    resp = await add_subcategory(
        session,
        SubcategoryCreate(category_id=42, sub_category_name="Mixers"),
        jpeg_image(),
        uploader,
    )

    assert resp.status_code == 400
    assert resp.message == get_response_message("CATEGORY_NOT_FOUND")
    assert uploader.uploads == []
    assert await count_rows(session_factory, Subcategory) == 0


async def test_subcategory_with_bad_icon_is_rejected(session, session_factory, uploader):
    category_id = await _category(session, uploader)
    fake_png = ImageUpload(filename="icon.png", content=b"not really a png")

    resp = await add_subcategory(
        session,
        SubcategoryCreate(category_id=category_id, sub_category_name="Mixers"),
        fake_png,
        uploader,
    )

    assert resp.status_code == 400
    assert resp.message == get_response_message("INVALID_IMAGE_FORMAT")
    assert await count_rows(session_factory, Subcategory) == 0


async def test_subcategories_listed_per_category(session, uploader):
    kitchen = await _category(session, uploader, "Kitchen")
    toys = await _category(session, uploader, "Toys")

    empty = await get_subcategories(session, kitchen)
    assert empty.status_code == 400
    assert empty.message == get_response_message("NO_SUBCATEGORY_PRESENT")

    await _subcategory(session, uploader, kitchen, "Mixers")
    await _subcategory(session, uploader, kitchen, "Kettles")
    await _subcategory(session, uploader, toys, "Puzzles")

    resp = await get_subcategories(session, kitchen)
    assert resp.status_code == 200
    assert resp.message == get_response_message("SUBCATEGORIES_FOUND")
    assert [s.sub_category_name for s in resp.data] == ["Mixers", "Kettles"]


async def test_subcategories_of_unknown_category(session):
    resp = await get_subcategories(session, 5)
    assert resp.status_code == 400
    assert resp.message == get_response_message("CATEGORY_NOT_FOUND")


async def test_delete_subcategory_removes_exactly_one_row(session, session_factory, uploader):
    kitchen = await _category(session, uploader, "Kitchen")
    mixers = await _subcategory(session, uploader, kitchen, "Mixers")
    await _subcategory(session, uploader, kitchen, "Kettles")

    resp = await delete_subcategory(session, kitchen, mixers)

    assert resp.status_code == 200
    assert resp.message == get_response_message("SUBCATEGORY_DELETED_SUCCESSFULLY")
    assert resp.data is None
    assert await count_rows(session_factory, Subcategory) == 1


async def test_delete_with_wrong_category_is_not_found(session, session_factory, uploader):
    kitchen = await _category(session, uploader, "Kitchen")
    toys = await _category(session, uploader, "Toys")
    mixers = await _subcategory(session, uploader, kitchen, "Mixers")

    resp = await delete_subcategory(session, toys, mixers)

    assert resp.status_code == 404
    assert resp.message == get_response_message("SUBCATEGORY_NOT_FOUND")
    assert await count_rows(session_factory, Subcategory) == 1


async def test_delete_twice_reports_not_found(session, uploader):
    kitchen = await _category(session, uploader, "Kitchen")
    mixers = await _subcategory(session, uploader, kitchen, "Mixers")

    assert (await delete_subcategory(session, kitchen, mixers)).status_code == 200
    assert (await delete_subcategory(session, kitchen, mixers)).status_code == 404


async def test_names_sharing_a_slug_are_both_stored(session, session_factory, uploader):
    first = await add_category(
        session, CategoryCreate(name="Toys & Games"), jpeg_image(), uploader
    )
    second = await add_category(
        session, CategoryCreate(name="Toys Games"), jpeg_image(), uploader
    )

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.data.slug == second.data.slug == "toys-games"
    assert second.data.name == "Toys Games"
    assert uploader.discarded == []
    assert await count_rows(session_factory, Category) == 2


async def test_failed_icon_upload_writes_no_subcategory(session, session_factory, uploader):
    kitchen = await _category(session, uploader, "Kitchen")

    resp = await add_subcategory(
        session,
        SubcategoryCreate(category_id=kitchen, sub_category_name="Mixers"),
        jpeg_image(),
        FakeUploader(fail=True),
    )

    assert resp.status_code == 500
    assert resp.message == get_response_message("SOMETHING_WRONG")
    assert await count_rows(session_factory, Subcategory) == 0


async def test_delete_affecting_no_rows_is_rolled_back(
    session, session_factory, uploader, monkeypatch
):
    kitchen = await _category(session, uploader, "Kitchen")
    mixers = await _subcategory(session, uploader, kitchen, "Mixers")

    # The row exists for the lookup, but the DELETE itself matches nothing.
    monkeypatch.setattr(
        subcategory_service,
        "delete",
        lambda model: sa_delete(model).where(model.subcategory_id == -1),
    )

    resp = await delete_subcategory(session, kitchen, mixers)

    assert resp.status_code == 400
    assert resp.message == get_response_message("SUBCATEGORY_DELETION_FAILED")
    assert resp.data is None
    assert await count_rows(session_factory, Subcategory) == 1
