import pytest

from assistant import Settings, create_app
from tests.helpers import FakePost


@pytest.fixture
def fake_post():
    return FakePost()


@pytest.fixture
def settings():
    return Settings(api_key="test-secret-key", model="gemini-test-model")


@pytest.fixture
def client(settings, fake_post):
    app = create_app(settings, post=fake_post)
    app.config["TESTING"] = True
    return app.test_client()
