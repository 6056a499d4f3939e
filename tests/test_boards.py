import pytest
from boards import BoardRegistry
from models import Board


@pytest.mark.asyncio
async def test_initialize_stores_every_seed_board(registry, seed_boards):
    for seed in seed_boards:
        assert await registry.find(seed.id) == seed


@pytest.mark.asyncio
async def test_initialize_creates_empty_thread_collections(db, registry):
    assert await db.get("threads_b") == []
    assert await db.get("threads_g") == []


@pytest.mark.asyncio
async def test_initialize_is_idempotent(registry, seed_boards):
    boards = await registry.initialize(seed_boards)
    assert [b.id for b in boards] == ["b", "g"]
    assert len(await registry.get_boards()) == 2


@pytest.mark.asyncio
async def test_initialize_appends_new_seed_boards(registry, seed_boards):
    extra = Board(id="sci", name="Science", description="Science discussion")
    boards = await registry.initialize(seed_boards + [extra])
    assert [b.id for b in boards] == ["b", "g", "sci"]


@pytest.mark.asyncio
async def test_initialize_keeps_existing_threads(db, registry, store, seed_boards):
    await store.create_thread("b", None, None, "still here", None)
    await registry.initialize(seed_boards)
    assert len(await store.list_threads("b")) == 1


@pytest.mark.asyncio
async def test_find_unknown_board(registry):
    assert await registry.find("nope") is None


@pytest.mark.asyncio
async def test_refresh_replaces_board_set(registry):
    seed = [Board(id="a", name="Anime", description="Anime & Manga discussion")]
    boards = await registry.refresh(seed)
    assert boards == seed
    assert await registry.get_boards() == seed
    assert await registry.find("b") is None


@pytest.mark.asyncio
async def test_refresh_never_drops_thread_data(db, registry, store, seed_boards):
    thread = await store.create_thread("b", "kept", None, "hi", None)

    await registry.refresh([seed_boards[1]])
    assert await registry.find("b") is None
    assert await db.has("threads_b")

    await registry.refresh(seed_boards)
    assert (await store.get_thread("b", thread.id)).subject == "kept"


@pytest.mark.asyncio
async def test_refresh_on_empty_store(db):
    registry = BoardRegistry(db)
    seed = [Board(id="food", name="Food", description="Food discussion")]
    assert await registry.refresh(seed) == seed
    assert await db.get("threads_food") == []
