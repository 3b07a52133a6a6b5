import copy
import logging
from unittest.mock import MagicMock

import pytest

COORDS_PAYLOAD = {
    "country": "GB",
    "square": {
        "southwest": {"lat": 1.0, "lng": 2.0},
        "northeast": {"lat": 1.1, "lng": 2.1},
    },
    "nearestPlace": None,
    "coordinates": {"lat": 1.05, "lng": 2.05},
    "words": "a.b.c",
    "language": "en",
    "map": "https://w3w.co/a.b.c",
}

LANGUAGES_PAYLOAD = {
    "languages": [
        {"code": "en", "name": "English", "nativeName": "English"},
        {"code": "fr", "name": "French", "nativeName": "Français"},
    ]
}


def _make_response(payload=None, status_code=200, reason="OK"):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def coords_payload():
    return copy.deepcopy(COORDS_PAYLOAD)


@pytest.fixture
def languages_payload():
    return copy.deepcopy(LANGUAGES_PAYLOAD)


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture(autouse=True)
def restore_root_logger():
    # The CLI replaces the root handlers on every invocation
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
