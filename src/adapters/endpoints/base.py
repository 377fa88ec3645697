"""Shared plumbing for the endpoint wrappers."""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.domain.errors import MalformedResponseError
from core.interfaces.dispatcher import Dispatcher

M = TypeVar("M", bound=BaseModel)


def segment(value: str) -> str:
    """URL-quote one path segment (ids, share tokens)."""

    return quote(str(value), safe="")


def parse_as(model: type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(f"Unexpected {model.__name__} payload") from exc


def parse_list_as(model: type[M], payload: Any) -> list[M]:
    try:
        return TypeAdapter(list[model]).validate_python(payload)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise MalformedResponseError(f"Unexpected list of {model.__name__} payload") from exc


class EndpointGroup:
    """Base for one API area; holds the dispatcher."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher
