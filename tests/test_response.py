import pytest

from k1ng_client.exceptions import DecodeError
from k1ng_client.response import Response


def test_from_json_maps_wire_keys():
    body = ('{"status": 200, "message": "OK", "count": 2, "errors": true, "data": ['
            '{"id_message": "a1", "status_code": "0", "status_message": "Success", "destination": "0811"},'
            '{"id_message": "a2", "status_code": "9", "status_message": "Rejected", "destination": "0822"}]}')
    response = Response.from_json(body)

    assert response.code == 200
    assert response.message == "OK"
    assert response.count == 2
    assert response.has_errors is True
    assert [r.destination for r in response.results] == ["0811", "0822"]
    assert response.results[1].status_message == "Rejected"


def test_missing_fields_take_zero_values():
    response = Response.from_json('{"status": 401, "message": "Unauthorized", "data": null}')
    assert response.count == 0
    assert response.results == []
    assert response.has_errors is False


@pytest.mark.parametrize("body", [
    "",
    "not json",
    "[1, 2]",
    '{"data": "x"}',
    '{"data": [1]}',
    '{"status": "200"}',
    '{"status": true}',
    '{"count": 1.5}',
    '{"errors": "false"}',
    '{"data": [{"id_message": 123}]}',
])
def test_malformed_body(body):
    with pytest.raises(DecodeError):
        Response.from_json(body)
