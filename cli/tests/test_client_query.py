from __future__ import annotations

from flightstats_client import FlexClient


def _client(**extra) -> FlexClient:
    return FlexClient({"appId": "my-id", "appKey": "my-key", **extra})


def test_build_endpoint_joins_segments() -> None:
    client = _client()
    assert client.build_endpoint("flightStatus", "v2", "arrival") == "flightStatus/rest/v2/json/arrival"


def test_build_endpoint_uses_configured_protocol_and_format() -> None:
    client = _client(protocol="soap", format="xml")
    assert client.build_endpoint("schedules", "v1", "flight/AA/100") == "schedules/soap/v1/xml/flight/AA/100"


def test_build_endpoint_keeps_empty_segments() -> None:
    client = _client()
    assert client.build_endpoint("schedules", "", "x") == "schedules/rest//json/x"


def test_build_query_adds_credentials_and_http_errors_flag() -> None:
    query = _client().build_query({})

    assert query == {
        "appId": "my-id",
        "appKey": "my-key",
        "extendedOptions": "useHTTPErrors",
    }


def test_build_query_wraps_scalar_extended_option() -> None:
    query = _client().build_query({"extendedOptions": "foo"})
    assert query["extendedOptions"] == "foo+useHTTPErrors"


def test_build_query_does_not_duplicate_http_errors_flag() -> None:
    client = _client()

    assert client.build_query({"extendedOptions": "useHTTPErrors"})["extendedOptions"] == "useHTTPErrors"
    query = client.build_query({"extendedOptions": ["useHTTPErrors", "includeDeltas"]})
    assert query["extendedOptions"] == "useHTTPErrors+includeDeltas"


def test_build_query_joins_extended_option_list() -> None:
    query = _client().build_query({"extendedOptions": ["a", "b"], "codeType": "IATA"})

    assert query["extendedOptions"] == "a+b+useHTTPErrors"
    assert query["codeType"] == "IATA"


def test_build_query_without_http_errors() -> None:
    client = _client(use_http_errors=False)

    assert client.build_query()["extendedOptions"] == ""
    assert client.build_query({"extendedOptions": "foo"})["extendedOptions"] == "foo"


def test_build_query_caller_credentials_win() -> None:
    query = _client().build_query({"appId": "other-id", "appKey": "other-key"})

    assert query["appId"] == "other-id"
    assert query["appKey"] == "other-key"
    assert list(query)[:2] == ["appId", "appKey"]


def test_build_query_does_not_mutate_caller_params() -> None:
    params = {"extendedOptions": ["foo"]}
    _client().build_query(params)
    assert params == {"extendedOptions": ["foo"]}
