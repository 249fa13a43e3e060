import json

from tripbooking.exceptions import StorageError
from tripbooking.responses import handle_response


def body_of(response):
    return json.loads(response.body)


def test_error_maps_to_500():
    response = handle_response(error=StorageError("disk I/O error"))
    assert response.status_code == 500
    assert body_of(response) == {"error": "disk I/O error"}


def test_error_wins_over_payload_and_changes():
    """A storage error is reported even when a payload and a row count are given."""
    response = handle_response(
        {"message": "Trip updated successfully"},
        error=StorageError("boom"),
        changes=1,
    )
    assert response.status_code == 500
    assert body_of(response) == {"error": "boom"}


def test_missing_payload_uses_defaults():
    response = handle_response(None)
    assert response.status_code == 404
    assert body_of(response) == {"error": "Not found"}


def test_missing_payload_uses_caller_status_and_message():
    response = handle_response(None, not_found_status=410, not_found_message="Trip not found")
    assert response.status_code == 410
    assert body_of(response) == {"error": "Trip not found"}


def test_zero_changes_is_not_found_even_with_acknowledgement():
    response = handle_response(
        {"message": "Meeting deleted successfully"},
        not_found_message="Meeting not found",
        changes=0,
    )
    assert response.status_code == 404
    assert body_of(response) == {"error": "Meeting not found"}


def test_positive_changes_returns_payload():
    response = handle_response({"message": "Meeting deleted successfully"}, changes=1)
    assert response.status_code == 200
    assert body_of(response) == {"message": "Meeting deleted successfully"}


def test_empty_list_is_a_valid_payload():
    response = handle_response([])
    assert response.status_code == 200
    assert body_of(response) == []


def test_row_payload_returned_as_is():
    response = handle_response({"idx": 1, "zone": "Asia"})
    assert response.status_code == 200
    assert body_of(response) == {"idx": 1, "zone": "Asia"}
