from resource_client.core.location import get_location_id, parse_id_from_location
from resource_client.core.request import TransportResponse


def test_parse_id_from_location_various():
    assert parse_id_from_location("https://api.test/resource/music:Track/555") == "555"
    assert parse_id_from_location("/resource/music:Track/abc/") == "abc"
    assert parse_id_from_location("/resource/music:Track/7?fields=id") == "7"
    assert parse_id_from_location(None) is None
    assert parse_id_from_location("") is None
    assert parse_id_from_location("/") is None


def test_get_location_id_reads_header_case_insensitively():
    response = TransportResponse(
        status_code=201, headers={"location": "/resource/music:Track/42"}
    )
    assert response.header("Location") == "/resource/music:Track/42"
    assert get_location_id(response) == "42"


def test_get_location_id_without_header():
    assert get_location_id(TransportResponse(status_code=201)) is None


def test_transport_response_normalizes_header_keys():
    response = TransportResponse(
        status_code=201, headers={"Location": "/a/1", "X-Trace": "t"}
    )
    assert response.headers == {"location": "/a/1", "x-trace": "t"}
    assert response.header("LOCATION") == "/a/1"
