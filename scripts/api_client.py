"""Lightweight REST client for the playerapi service."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_player(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid player JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the playerapi REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--list", action="store_true", help="List every player")
    parser.add_argument("--get", type=int, metavar="ID", help="Fetch a player by id")
    parser.add_argument("--squad-number", type=int, metavar="N", help="Fetch a player by squad number")
    parser.add_argument("--create", type=Path, metavar="JSON", help="Create a player from a JSON file")
    parser.add_argument("--update", type=Path, metavar="JSON", help="Replace a player from a JSON file")
    parser.add_argument("--delete", type=int, metavar="ID", help="Delete a player by id")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list:
            resp = client.get("/players")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2, ensure_ascii=False))
        if args.get is not None:
            resp = client.get(f"/players/{args.get}")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.get} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2, ensure_ascii=False))
        if args.squad_number is not None:
            resp = client.get(f"/players/squadNumber/{args.squad_number}")
            if resp.status_code == 404:
                raise SystemExit(f"no player wears #{args.squad_number}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2, ensure_ascii=False))
        if args.create:
            resp = client.post("/players", json=load_player(args.create))
            if resp.status_code == 409:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print(f"Created {resp.headers.get('location')}")
        if args.update:
            payload = load_player(args.update)
            resp = client.put(f"/players/{payload['id']}", json=payload)
            if resp.status_code == 404:
                raise SystemExit(f"player {payload['id']} not found")
            resp.raise_for_status()
            print(f"Updated player {payload['id']}")
        if args.delete is not None:
            resp = client.delete(f"/players/{args.delete}")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.delete} not found")
            resp.raise_for_status()
            print(f"Deleted player {args.delete}")


if __name__ == "__main__":
    main()
