"""REST API for players."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from playerapi.api.schemas import HealthResponse, PlayerPayload
from playerapi.cache import Cache, MemoryCache, NullCache
from playerapi.config import Settings, load_settings
from playerapi.errors import ConflictError, NotFoundError
from playerapi.models import Player
from playerapi.persistence import PlayerStore
from playerapi.persistence.seed import squad
from playerapi.services import PlayerService


logger = logging.getLogger("uvicorn.error")


def _build_cache(settings: Settings) -> Cache:
    if settings.cache_enabled:
        return MemoryCache()
    logger.info("Player cache disabled; every read goes to the store")
    return NullCache()


def create_app(settings: Settings | None = None, *, cache: Cache | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="playerapi")
    store = PlayerStore(settings.db_path)
    if settings.seed:
        store.seed(squad())
    cache = cache if cache is not None else _build_cache(settings)
    service = PlayerService(store, cache, expiration=settings.cache_expiration)
    app.state.settings = settings
    app.state.player_store = store
    app.state.player_cache = cache
    app.state.player_service = service

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/players", response_model=List[Player])
    async def list_players() -> List[Player]:
        return await service.retrieve_all()

    @app.get("/players/squadNumber/{squad_number}", response_model=Player)
    async def get_player_by_squad_number(squad_number: int) -> Player:
        player = await service.retrieve_by_squad_number(squad_number)
        if player is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return player

    @app.get("/players/{player_id}", response_model=Player)
    async def get_player(player_id: int) -> Player:
        player = await service.retrieve_by_id(player_id)
        if player is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return player

    @app.post("/players", response_model=Player, status_code=201)
    async def create_player(payload: PlayerPayload, response: Response) -> Player:
        player = payload.to_player()
        try:
            await service.create(player)
        except ConflictError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        response.headers["Location"] = f"/players/{player.id}"
        return player

    @app.put("/players/{player_id}", status_code=204)
    async def update_player(player_id: int, payload: PlayerPayload) -> Response:
        if payload.id != player_id:
            raise HTTPException(status_code=400, detail="Path id does not match body id")
        try:
            await service.update(payload.to_player())
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return Response(status_code=204)

    @app.delete("/players/{player_id}", status_code=204)
    async def delete_player(player_id: int) -> Response:
        try:
            await service.delete(player_id)
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return Response(status_code=204)

    return app


__all__ = ["create_app"]
