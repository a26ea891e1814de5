from datetime import date
from uuid import uuid4

import pytest

from playerapi.errors import ConflictError, NotFoundError
from playerapi.persistence import PlayerStore
from playerapi.persistence.seed import new_player, player_by_id, squad, starting_eleven


@pytest.fixture
def store(tmp_path):
    store = PlayerStore(tmp_path / "players.sqlite3")
    store.seed(squad())
    return store


def test_seed_is_idempotent(tmp_path):
    store = PlayerStore(tmp_path / "players.sqlite3")

    assert store.seed(squad()) == len(squad())
    assert store.seed(squad()) == 0


@pytest.mark.anyio
async def test_find_all_returns_players_ordered_by_id(store):
    players = await store.find_all()

    assert [player.id for player in players] == sorted(player.id for player in squad())
    assert players == squad()


@pytest.mark.anyio
async def test_find_all_on_empty_store(tmp_path):
    store = PlayerStore(tmp_path / "empty.sqlite3")

    assert await store.find_all() == []
    assert await store.count() == 0


@pytest.mark.anyio
async def test_find_by_id_round_trips_every_field(store):
    player = await store.find_by_id(1)

    assert player == player_by_id(1)
    assert player.date_of_birth == date(1992, 9, 2)
    assert player.starting11 is True
    assert await store.find_by_id(999) is None


@pytest.mark.anyio
async def test_find_by_squad_number(store):
    player = await store.find_by_squad_number(10)

    assert player is not None
    assert player.last_name == "Messi"
    assert await store.find_by_squad_number(99) is None


@pytest.mark.anyio
async def test_add_then_conflict(store):
    player = new_player()

    await store.add(player)
    assert await store.find_by_id(12) == player

    with pytest.raises(ConflictError):
        await store.add(player)


@pytest.mark.anyio
async def test_update_replaces_fields(store):
    player = player_by_id(1)
    player.first_name = "Emiliano"
    player.middle_name = ""

    await store.update(player)

    stored = await store.find_by_id(1)
    assert stored.first_name == "Emiliano"
    assert stored.middle_name == ""


@pytest.mark.anyio
async def test_update_missing_player_raises(store):
    with pytest.raises(NotFoundError):
        await store.update(new_player())


@pytest.mark.anyio
async def test_remove(store):
    before = await store.count()

    await store.remove(26)

    assert await store.find_by_id(26) is None
    assert await store.count() == before - 1
    with pytest.raises(NotFoundError):
        await store.remove(26)


@pytest.mark.anyio
async def test_seeded_starting_eleven(store):
    stored = [player for player in await store.find_all() if player.starting11]

    assert [player.id for player in starting_eleven()] == list(range(1, 12))
    assert stored == starting_eleven()


@pytest.mark.anyio
async def test_shared_memory_uri_survives_between_calls():
    store = PlayerStore(f"file:players-{uuid4().hex}?mode=memory&cache=shared")
    try:
        assert store.seed(squad()) == len(squad())
        await store.add(new_player())

        players = await store.find_all()
        assert len(players) == len(squad()) + 1
        assert await store.find_by_id(12) == new_player()
    finally:
        store.close()


@pytest.mark.anyio
async def test_memory_uri_without_shared_cache_is_shared():
    store = PlayerStore(f"file:players-{uuid4().hex}?mode=memory")
    try:
        assert store.db_path.endswith("&cache=shared")
        store.seed(squad())
        assert await store.count() == len(squad())
    finally:
        store.close()
