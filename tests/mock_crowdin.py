import json
from typing import Any
from unittest import mock

import requests

PROJECT_ID = 343435
TOKEN = "secret-token"  # noqa: S105


def member(
    username: str, full_name: str | None = None, role: str = "translator"
) -> dict[str, Any]:
    """A member resource as found in the ``data`` array of a members page."""
    return {
        "data": {
            "id": 1,
            "username": username,
            "fullName": full_name,
            "role": role,
        }
    }


def numbered_members(count: int, start: int = 0) -> list[dict[str, Any]]:
    return [member(f"user{i:03d}") for i in range(start, start + count)]


def make_response(
    status_code: int, payload: Any = None, body: str | None = None  # noqa: ANN401
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    text = body if body is not None else json.dumps(payload)
    response._content = text.encode("utf-8")  # noqa: SLF001
    response.encoding = "utf-8"
    return response


def page_response(members: list[dict[str, Any]]) -> requests.Response:
    return make_response(200, {"data": members, "pagination": {"offset": 0}})


def mock_session(*responses: requests.Response) -> mock.MagicMock:
    """A session returning ``responses`` in order, one per GET."""
    session = mock.MagicMock(spec=requests.Session)
    session.headers = {}
    session.get.side_effect = list(responses)
    return session
