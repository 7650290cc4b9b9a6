# pyright: reportUnknownParameterType=false, reportUnknownMemberType=false
from unittest.mock import Mock, patch

import pytest

from hippie.networking.client import HttpClient
from hippie.networking.config import HttpClientConfig
from hippie.networking.types import Response, StatusCategory


def _mock_response(
    *,
    content: bytes = b"",
    status: int = 200,
    url: str = "http://example.com",
    reason: str = "OK",
    headers=None,
):
    response = Mock()
    response.content = content
    response.status_code = status
    response.url = url
    response.reason = reason
    response.headers = headers or {"Content-Type": "application/json"}
    return response


def test_get_404_is_a_response_not_an_error():
    client = HttpClient(HttpClientConfig())

    with patch("requests.Session.request") as mock_request:
        mock_request.return_value = _mock_response(
            content=b"not found",
            status=404,
            reason="Not Found",
        )
        response = client.get("http://example.com/missing")

    assert response.status_code == 404
    assert response.content == b"not found"
    assert response.reason == "Not Found"
    assert response.category is StatusCategory.CLIENT_ERROR


def test_get_500_is_a_response_not_an_error():
    client = HttpClient(HttpClientConfig())

    with patch("requests.Session.request") as mock_request:
        mock_request.return_value = _mock_response(
            content=b"server error",
            status=500,
            reason="Internal Server Error",
        )
        response = client.get("http://example.com/error")

    assert response.status_code == 500
    assert response.category is StatusCategory.SERVER_ERROR
    assert not response.is_success


def test_get_302_without_redirect_following_is_returned():
    client = HttpClient(HttpClientConfig())

    with patch("requests.Session.request") as mock_request:
        mock_request.return_value = _mock_response(
            status=302,
            reason="Found",
            headers={"Location": "/elsewhere"},
        )
        response = client.get("http://example.com/redirect")

    assert response.status_code == 302
    assert response.is_redirect
    assert response.headers["location"] == "/elsewhere"
    mock_request.assert_called_once()


@pytest.mark.parametrize(
    "status, category",
    [
        (100, StatusCategory.INFORMATIONAL),
        (204, StatusCategory.SUCCESS),
        (301, StatusCategory.REDIRECTION),
        (304, StatusCategory.REDIRECTION),
        (429, StatusCategory.CLIENT_ERROR),
        (503, StatusCategory.SERVER_ERROR),
    ],
)
def test_status_categories(status, category):
    assert Response(status_code=status).category is category


@pytest.mark.parametrize("status", [0, 99, 600, 999])
def test_status_outside_known_classes_is_unclassified(status):
    response = Response(status_code=status)

    assert response.category is None
    assert not response.is_success
    assert not response.is_redirect


def test_for_status_rejects_unknown_classes():
    with pytest.raises(ValueError):
        StatusCategory.for_status(600)


def test_response_is_immutable():
    response = Response(status_code=200, headers={"X-A": "1"})

    with pytest.raises(AttributeError):
        response.status_code = 201  # type: ignore[misc]
    with pytest.raises(TypeError):
        response.headers["X-A"] = "2"  # type: ignore[index]


def test_response_json_and_text():
    response = Response(status_code=200, content=b'{"count": 3}')

    assert response.json() == {"count": 3}
    assert response.text == '{"count": 3}'
