from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from kvstore import Storer
from settings import Settings

router = APIRouter(tags=["kv"])
logger = logging.getLogger(__name__)


class MessageResponse(BaseModel):
    message: str


class ReadResponse(BaseModel):
    value: str


class UpdateResponse(BaseModel):
    message: str
    key: str
    value: str


class DeleteResponse(BaseModel):
    message: str
    value: str


def get_store(request: Request) -> Storer[str, str]:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _log_op(settings: Settings, op: str, key: str) -> None:
    if settings.debug_log_requests:
        logger.info("KV %s: key=%s", op, key)


# Handlers are plain functions so each request runs on the server's worker
# thread pool; the store lock blocks and must stay off the event loop.


@router.get("/create/{key}/{value}", response_model=MessageResponse)
def handle_create(
    key: str,
    value: str,
    store: Storer[str, str] = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    _log_op(settings, "CREATE", key)
    store.create(key, value)
    return MessageResponse(message="created")


@router.get("/read/{key}", response_model=ReadResponse)
def handle_read(
    key: str,
    store: Storer[str, str] = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> ReadResponse:
    _log_op(settings, "READ", key)
    return ReadResponse(value=store.read(key))


@router.get("/update/{key}/{value}", response_model=UpdateResponse)
def handle_update(
    key: str,
    value: str,
    store: Storer[str, str] = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> UpdateResponse:
    _log_op(settings, "UPDATE", key)
    store.update(key, value)
    return UpdateResponse(message="updated", key=key, value=value)


@router.get("/delete/{key}", response_model=DeleteResponse)
def handle_delete(
    key: str,
    store: Storer[str, str] = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> DeleteResponse:
    _log_op(settings, "DELETE", key)
    prior = store.delete(key)
    return DeleteResponse(message="deleted", value="" if prior is None else prior)
