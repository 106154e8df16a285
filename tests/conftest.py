from typing import Any
from unittest.mock import patch

import pytest

from saavn_gateway import create_app
from saavn_gateway.src.services.saavn_service import SaavnService


UA = "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/109.0"


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, invalid_json: bool = False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def service():
    return SaavnService(api_url="https://saavn.test/api.php", timeout=20, user_agent=UA)


@pytest.fixture
def upstream():
    """`requests.post` parcheado; configurar con `.return_value` o `.side_effect`."""
    with patch("saavn_gateway.src.services.saavn_service.requests.post") as post:
        yield post


@pytest.fixture
def client(service):
    app = create_app(service=service)
    app.config["TESTING"] = True
    return app.test_client()
