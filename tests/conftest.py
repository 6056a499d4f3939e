import itertools
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from app import create_app
from boards import BoardRegistry
from database import DatabaseManager
from models import Board
from threads import ThreadStore


class FakeClock:
    """Strictly increasing millisecond clock so bump order is deterministic."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        self.now += 1
        return self.now


@pytest.fixture
def seed_boards():
    return [
        Board(id="b", name="Random", description="Random discussion"),
        Board(id="g", name="Technology", description="Technology discussion"),
    ]


@pytest_asyncio.fixture
async def db(tmp_path):
    manager = DatabaseManager(str(tmp_path / "test.db"))
    await manager.initialize()
    return manager


@pytest_asyncio.fixture
async def registry(db, seed_boards):
    registry = BoardRegistry(db)
    await registry.initialize(seed_boards)
    return registry


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(db, registry, clock):
    return ThreadStore(db, id_factory=itertools.count(1).__next__, clock=clock)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(tmp_path, upload_dir):
    app = create_app(db_path=str(tmp_path / "app.db"), upload_dir=str(upload_dir))
    with TestClient(app) as test_client:
        yield test_client
