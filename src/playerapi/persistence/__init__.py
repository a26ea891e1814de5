"""Persistence layer for player records."""

from __future__ import annotations

import logging
import sqlite3
import tempfile
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

import anyio.to_thread

from playerapi.errors import ConflictError, NotFoundError
from playerapi.models import Player


logger = logging.getLogger(__name__)

_COLUMNS = (
    "id",
    "first_name",
    "middle_name",
    "last_name",
    "date_of_birth",
    "squad_number",
    "position",
    "abbr_position",
    "team",
    "league",
    "starting11",
)


class PlayerStore:
    """SQLite-backed store for players.

    The public coroutine methods run their SQLite work on a worker thread so the
    event loop is never blocked. Each call opens its own connection and SQLite
    serializes the writes.

    A shared in-memory URI (``file:name?mode=memory&cache=shared``) only lives
    while a connection to it is open, so the store holds one open for its own
    lifetime; call :meth:`close` to release it.
    """

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        self._keeper: Optional[sqlite3.Connection] = None
        if isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path: Path | str = db_path
            self._use_uri = True
            if "mode=memory" in db_path:
                if "cache=shared" not in db_path:
                    db_path += "&cache=shared" if "?" in db_path else "?cache=shared"
                    self.db_path = db_path
                self._keeper = sqlite3.connect(db_path, uri=True, check_same_thread=False)
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def close(self) -> None:
        if self._keeper is not None:
            self._keeper.close()
            self._keeper = None

    def _connect(self) -> sqlite3.Connection:
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            try:
                conn = sqlite3.connect(self.db_path)
            except sqlite3.OperationalError:
                fallback_dir = Path(tempfile.gettempdir()) / "playerapi-runtime"
                fallback_dir.mkdir(parents=True, exist_ok=True)
                fallback = fallback_dir / "players.sqlite3"
                logger.warning("Cannot open %s; falling back to %s", self.db_path, fallback)
                conn = sqlite3.connect(fallback)
                self.db_path = fallback
                self._create_schema(conn)
        else:
            conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            self._create_schema(conn)
        conn.close()

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS players (
                id INTEGER PRIMARY KEY,
                first_name TEXT NOT NULL,
                middle_name TEXT,
                last_name TEXT NOT NULL,
                date_of_birth TEXT,
                squad_number INTEGER NOT NULL,
                position TEXT NOT NULL,
                abbr_position TEXT,
                team TEXT,
                league TEXT,
                starting11 BOOLEAN NOT NULL DEFAULT 0
            )
            """
        )
        conn.commit()

    # -- async API ---------------------------------------------------------

    async def find_all(self) -> List[Player]:
        return await anyio.to_thread.run_sync(self._find_all)

    async def find_by_id(self, player_id: int) -> Optional[Player]:
        return await anyio.to_thread.run_sync(self._find_by_id, player_id)

    async def find_by_squad_number(self, squad_number: int) -> Optional[Player]:
        return await anyio.to_thread.run_sync(self._find_by_squad_number, squad_number)

    async def add(self, player: Player) -> None:
        await anyio.to_thread.run_sync(self._add, player)

    async def update(self, player: Player) -> None:
        await anyio.to_thread.run_sync(self._update, player)

    async def remove(self, player_id: int) -> None:
        await anyio.to_thread.run_sync(self._remove, player_id)

    async def count(self) -> int:
        return await anyio.to_thread.run_sync(self._count)

    # -- blocking helpers --------------------------------------------------

    def seed(self, players: Iterable[Player]) -> int:
        """Insert players whose id is not present yet; return how many were added."""
        rows = [self._player_to_row(player) for player in players]
        conn = self._connect()
        try:
            with conn:
                before = conn.total_changes
                conn.executemany(
                    f"INSERT OR IGNORE INTO players ({', '.join(_COLUMNS)}) "
                    f"VALUES ({', '.join('?' for _ in _COLUMNS)})",
                    rows,
                )
                inserted = conn.total_changes - before
        finally:
            conn.close()
        logger.info("Seeded %d player(s) into %s", inserted, self.db_path)
        return inserted

    def _find_all(self) -> List[Player]:
        conn = self._connect()
        try:
            rows = conn.execute("SELECT * FROM players ORDER BY id").fetchall()
        finally:
            conn.close()
        return [self._row_to_player(row) for row in rows]

    def _find_by_id(self, player_id: int) -> Optional[Player]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT * FROM players WHERE id = ?", (player_id,)).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return self._row_to_player(row)

    def _find_by_squad_number(self, squad_number: int) -> Optional[Player]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT * FROM players WHERE squad_number = ? ORDER BY id LIMIT 1",
                (squad_number,),
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return self._row_to_player(row)

    def _add(self, player: Player) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    f"INSERT INTO players ({', '.join(_COLUMNS)}) "
                    f"VALUES ({', '.join('?' for _ in _COLUMNS)})",
                    self._player_to_row(player),
                )
        except sqlite3.IntegrityError as exc:
            raise ConflictError(player.id) from exc
        finally:
            conn.close()

    def _update(self, player: Player) -> None:
        assignments = ", ".join(f"{column} = ?" for column in _COLUMNS[1:])
        row = self._player_to_row(player)
        conn = self._connect()
        try:
            with conn:
                cursor = conn.execute(
                    f"UPDATE players SET {assignments} WHERE id = ?",
                    (*row[1:], player.id),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(player.id)
        finally:
            conn.close()

    def _remove(self, player_id: int) -> None:
        conn = self._connect()
        try:
            with conn:
                cursor = conn.execute("DELETE FROM players WHERE id = ?", (player_id,))
                if cursor.rowcount == 0:
                    raise NotFoundError(player_id)
        finally:
            conn.close()

    def _count(self) -> int:
        conn = self._connect()
        try:
            (total,) = conn.execute("SELECT COUNT(*) FROM players").fetchone()
        finally:
            conn.close()
        return int(total)

    @staticmethod
    def _player_to_row(player: Player) -> tuple:
        return (
            player.id,
            player.first_name,
            player.middle_name,
            player.last_name,
            player.date_of_birth.isoformat() if player.date_of_birth else None,
            player.squad_number,
            player.position,
            player.abbr_position,
            player.team,
            player.league,
            int(player.starting11),
        )

    @staticmethod
    def _row_to_player(row: sqlite3.Row) -> Player:
        dob = row["date_of_birth"]
        return Player(
            id=row["id"],
            first_name=row["first_name"],
            middle_name=row["middle_name"],
            last_name=row["last_name"],
            date_of_birth=date.fromisoformat(dob) if dob else None,
            squad_number=row["squad_number"],
            position=row["position"],
            abbr_position=row["abbr_position"],
            team=row["team"],
            league=row["league"],
            starting11=bool(row["starting11"]),
        )


__all__ = ["PlayerStore"]
