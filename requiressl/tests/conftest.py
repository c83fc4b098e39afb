import pytest
from django.apps import apps


@pytest.fixture(autouse=True)
def ssl_policy():
    """
    Fresh process-wide policy for every test.

    Memoized hosts and the engine check would otherwise leak from one
    test into the next.
    """
    config = apps.get_app_config("requiressl")
    engine, engine_disabled = config.engine, config.engine_disabled

    config.engine_disabled = False
    yield config.load_policy()

    config.engine, config.engine_disabled = engine, engine_disabled
    config.load_policy()


@pytest.fixture
def secure_only(settings):
    """Settings with explicit hosts on both schemes."""
    settings.ALLOWED_HOSTS = ["localhost", "secure.example.com", "www.example.com"]
    settings.REQUIRE_SSL = {"https": "secure.example.com", "http": "www.example.com"}
    return settings
