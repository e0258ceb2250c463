import pytest
from app.core import config

_SETTING_NAMES = [
    "WIKI_BASE_URL",
    "ENCODE_TOPIC",
    "REQUEST_TIMEOUT",
    "MAX_REDIRECTS",
    "LOOKUP_DEADLINE_SECONDS",
    "TRUNCATE_WINDOW",
]

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Pin settings to known values and restore them after each test"""
    original = {name: getattr(config.settings, name) for name in _SETTING_NAMES}

    config.settings.WIKI_BASE_URL = "https://en.wikipedia.org/wiki/"
    config.settings.ENCODE_TOPIC = False
    config.settings.MAX_REDIRECTS = 1
    config.settings.LOOKUP_DEADLINE_SECONDS = None
    config.settings.TRUNCATE_WINDOW = 32000

    yield

    for name, value in original.items():
        setattr(config.settings, name, value)
