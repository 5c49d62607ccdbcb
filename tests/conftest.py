import pytest

from discourse import ClientConfig, DiscourseClient

HOST = "forum.example.org"
BASE_URL = f"https://{HOST}"


@pytest.fixture
def client_config():
    return ClientConfig(host=HOST, api_username="system", api_key="secret-key")


@pytest.fixture
def client(client_config):
    discourse_client = DiscourseClient(client_config)
    yield discourse_client
    discourse_client.close()


@pytest.fixture
def forum_env(monkeypatch):
    monkeypatch.setenv("DISCOURSE_HOST", HOST)
    monkeypatch.setenv("DISCOURSE_API_USERNAME", "system")
    monkeypatch.setenv("DISCOURSE_API_KEY", "secret-key")
    monkeypatch.delenv("DISCOURSE_TIMEOUT", raising=False)
