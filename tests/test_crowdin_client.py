import pytest
import requests

from credits_generator.clients import CrowdinClient, get_crowdin_client
from credits_generator.config import CreditsConfig
from credits_generator.exceptions import (
    ApiError,
    ConfigurationError,
    MalformedResponseError,
)
from tests.mock_crowdin import (
    PROJECT_ID,
    TOKEN,
    make_response,
    member,
    mock_session,
    page_response,
)


def test_get_members_page_request():
    session = mock_session(page_response([]))
    client = CrowdinClient(TOKEN, session=session, timeout=3)

    client.get_members_page(PROJECT_ID, 2)

    session.get.assert_called_once_with(
        "https://crowdin.com/api/v2/projects/343435/members",
        params={"limit": 100, "offset": 200},
        timeout=3,
    )
    assert session.headers["accept"] == "application/json"
    assert session.headers["authorization"] == "Bearer secret-token"


def test_get_members_page_parses_members():
    session = mock_session(
        page_response(
            [
                member("alice", "Alice A"),
                member("bob", None, role="blocked"),
                member("carol", ""),
            ]
        )
    )
    client = CrowdinClient(TOKEN, session=session)

    members = client.get_members_page(PROJECT_ID, 0)

    assert [m.username for m in members] == ["alice", "bob", "carol"]
    assert [m.display_name for m in members] == ["Alice A", "bob", "carol"]
    assert [m.is_blocked for m in members] == [False, True, False]


def test_get_members_page_non_200_raises_api_error():
    body = '{"error": {"code": 401, "message": "Unauthorized"}}'
    session = mock_session(make_response(401, body=body))
    client = CrowdinClient(TOKEN, session=session)

    with pytest.raises(ApiError) as exc_info:
        client.get_members_page(PROJECT_ID, 0)

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == body
    assert exc_info.value.payload == {
        "error": {"code": 401, "message": "Unauthorized"}
    }


def test_get_members_page_unparsable_error_body():
    session = mock_session(make_response(502, body="<html>Bad Gateway</html>"))
    client = CrowdinClient(TOKEN, session=session)

    with pytest.raises(requests.exceptions.JSONDecodeError):
        client.get_members_page(PROJECT_ID, 0)


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        '{"members": []}',
        '{"data": [{"data": {"fullName": "No Username"}}]}',
    ],
)
def test_get_members_page_malformed_body(body):
    session = mock_session(make_response(200, body=body))
    client = CrowdinClient(TOKEN, session=session)

    with pytest.raises(MalformedResponseError):
        client.get_members_page(PROJECT_ID, 0)


def test_custom_host():
    session = mock_session(page_response([]))
    client = CrowdinClient(TOKEN, host="example.crowdin.com", session=session)

    client.get_members_page(7, 0)

    assert session.get.call_args.args[0] == (
        "https://example.crowdin.com/api/v2/projects/7/members"
    )
    assert client.profile_url("alice") == "https://example.crowdin.com/profile/alice"


def test_get_crowdin_client_requires_token():
    with pytest.raises(ConfigurationError):
        get_crowdin_client(CreditsConfig())


def test_get_crowdin_client_uses_config():
    config = CreditsConfig(
        crowdin_token=TOKEN, crowdin_host="crowdin.example.org", timeout=2.5
    )

    client = get_crowdin_client(config)

    assert client.host == "crowdin.example.org"
    assert client.timeout == 2.5
    assert client.session.headers["authorization"] == f"Bearer {TOKEN}"
