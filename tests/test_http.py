import httpx
import pytest

from geoloc.core.errors import DecodeError
from geoloc.core.http import DEFAULT_USER_AGENT, get_json


def _mock_client(response):
    return httpx.Client(transport=httpx.MockTransport(lambda request: response))


def test_get_json_raises_on_error_status_by_default():
    client = _mock_client(httpx.Response(401, json={"cod": 401}))

    with pytest.raises(httpx.HTTPStatusError):
        get_json("https://example.test/geo", client=client)


def test_get_json_can_decode_error_status_body():
    client = _mock_client(httpx.Response(401, json={"cod": 401, "message": "Invalid API key"}))

    assert get_json("https://example.test/geo", client=client, raise_for_status=False) == {
        "cod": 401,
        "message": "Invalid API key",
    }


def test_get_json_invalid_body_is_decode_error():
    client = _mock_client(httpx.Response(200, content=b"{broken"))

    with pytest.raises(DecodeError):
        get_json("https://example.test/geo", client=client)


def test_get_json_sends_user_agent():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    client = httpx.Client(transport=httpx.MockTransport(handler))

    assert get_json("https://example.test/geo", params={"q": "x"}, client=client) == []
    assert seen[0].headers["User-Agent"] == DEFAULT_USER_AGENT
