import pytest
from fastapi.testclient import TestClient

from agent.agent import Assistant
from agent.core.matcher import FuzzyMatcher
from agent.core.memory import ChatHistory, MemoryStore
from agent.tools import ImageSearchClient, TextGenerationClient
from app.main import create_app
from config.settings import Settings


@pytest.fixture
def settings(tmp_path):
    s = Settings()
    s.memory_file = str(tmp_path / "teach.txt")
    s.static_dir = None
    return s


@pytest.fixture
def memory(tmp_path):
    store = MemoryStore(tmp_path / "teach.txt")
    store.load()
    return store


@pytest.fixture
def images(mocker):
    return mocker.Mock(spec=ImageSearchClient)


@pytest.fixture
def generator(mocker):
    return mocker.Mock(spec=TextGenerationClient)


@pytest.fixture
def assistant(memory, images, generator):
    return Assistant(
        memory=memory,
        history=ChatHistory(),
        matcher=FuzzyMatcher(threshold=0.4),
        images=images,
        generator=generator,
    )


@pytest.fixture
def client(assistant, settings):
    app = create_app(assistant=assistant, app_settings=settings)
    return TestClient(app)
