import json

from app.core.messages import get_response_message
from app.core.responses import as_json_response, error_response, success_response


def test_success_envelope_carries_data_and_status():
    resp = as_json_response(success_response(200, "COUNTRY_FOUND", [{"name": "India"}]))
    body = json.loads(resp.body)

    assert resp.status_code == 200
    assert body == {
        "statusCode": 200,
        "message": get_response_message("COUNTRY_FOUND"),
        "data": [{"name": "India"}],
    }


def test_envelope_without_data_omits_the_key():
    resp = as_json_response(success_response(200, "SUBCATEGORY_DELETED_SUCCESSFULLY"))
    body = json.loads(resp.body)

    assert "data" not in body
    assert "error" not in body


def test_error_envelope_describes_the_exception():
    dto = error_response(500, "SOMETHING_WRONG", error=RuntimeError("boom"))
    resp = as_json_response(dto)
    body = json.loads(resp.body)

    assert resp.status_code == 500
    assert body["error"] == {"type": "RuntimeError", "detail": "boom"}


def test_unknown_message_key_falls_back_to_the_key():
    assert get_response_message("NOT_A_REAL_KEY") == "NOT_A_REAL_KEY"
