import pytest


@pytest.mark.asyncio
async def test_missing_key(db):
    assert await db.get("nope") is None
    assert not await db.has("nope")


@pytest.mark.asyncio
async def test_set_and_get_roundtrip(db):
    await db.set("threads_b", [{"id": 1, "subject": "x"}])
    assert await db.has("threads_b")
    assert await db.get("threads_b") == [{"id": 1, "subject": "x"}]


@pytest.mark.asyncio
async def test_set_overwrites(db):
    await db.set("boards", [1])
    await db.set("boards", [2, 3])
    assert await db.get("boards") == [2, 3]


@pytest.mark.asyncio
async def test_empty_list_is_present(db):
    await db.set("threads_g", [])
    assert await db.has("threads_g")
    assert await db.get("threads_g") == []
