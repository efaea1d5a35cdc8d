from unittest.mock import Mock

import pytest
import requests


def _response(payload=None, status_code=200, json_error=None):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def make_response():
    """Factory for fake ``requests.Response`` objects."""
    return _response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)
