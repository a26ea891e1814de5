"""Command-line interface for running and seeding the player API."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path

import anyio

from playerapi.config import load_settings, resolve_db_path
from playerapi.persistence import PlayerStore
from playerapi.persistence.seed import squad


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Player CRUD API")
    parser.add_argument(
        "--db",
        type=resolve_db_path,
        default=None,
        help="SQLite database path or file: URI (overrides PLAYERAPI_DB_PATH)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve.add_argument("--port", type=int, default=8000, help="Port to bind")
    serve.add_argument("--no-cache", action="store_true", help="Disable the players cache")

    sub.add_parser("seed", help="Create the schema and load the reference squad")

    dump = sub.add_parser("dump", help="Print every stored player as JSON")
    dump.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings()
    if args.db is not None:
        settings = replace(settings, db_path=args.db)

    if args.command == "serve":
        import uvicorn

        from playerapi.api import create_app

        if args.no_cache:
            settings = replace(settings, cache_enabled=False)
        uvicorn.run(create_app(settings), host=args.host, port=args.port)
        return

    store = PlayerStore(settings.db_path)
    if args.command == "seed":
        inserted = store.seed(squad())
        print(f"Inserted {inserted} player(s) into {store.db_path}")
        return

    if args.command == "dump":
        players = [player.model_dump(mode="json", by_alias=True) for player in anyio.run(store.find_all)]
        text = json.dumps(players, indent=2, ensure_ascii=False)
        if args.output:
            args.output.write_text(text, encoding="utf-8")
            print(f"Wrote {len(players)} player(s) to {args.output}")
        else:
            print(text)


if __name__ == "__main__":
    main()
