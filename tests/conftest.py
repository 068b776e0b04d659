from pathlib import Path
from unittest.mock import Mock

import pytest
import requests


FIXTURES = Path(__file__).resolve().parent / "fixtures"


def load_fixture_text(filename: str) -> str:
    return (FIXTURES / filename).read_text(encoding="utf-8")


def build_response(text: str = "", status_code: int = 200, url: str = "https://pokeapi.test/") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    response.reason = "OK" if status_code < 400 else "Error"
    return response


def build_session(*, returns=None, raises=None) -> Mock:
    session = Mock(spec=requests.Session)
    if raises is not None:
        session.request.side_effect = raises
    else:
        session.request.return_value = returns
    return session


@pytest.fixture
def fixture_text():
    return load_fixture_text


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def make_session():
    return build_session
