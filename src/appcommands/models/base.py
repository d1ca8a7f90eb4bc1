from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from enum import Enum

from pydantic_core.core_schema import CoreSchema, any_schema
from pydantic.json_schema import JsonSchemaValue
from pydantic import BaseModel

from appcommands.missing import MISSING, _MissingType, is_not_missing


__all__ = (
    'PydanticArbitraryType',
    'RawBaseModel',
    'filter_missing',
    'get_field',
)


class RawBaseModel(BaseModel):
    def __init__(self, **data) -> None:  # noqa: ANN003
        super().__init__(**data)
        self.__raw_data = data.copy()

    @property
    def _raw(self) -> dict:
        return self.__raw_data

    def as_payload(self) -> dict:
        return filter_missing(self.model_dump())


class PydanticArbitraryType:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: None,
        _handler: None
    ) -> CoreSchema:
        return any_schema()

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: None
    ) -> JsonSchemaValue:
        return {'type': 'any'}


def get_field(source: Any, *names: str) -> Any:  # noqa: ANN401
    """
    read a field from either a mapping or a model,
    the first name that is present wins, MISSING if none are
    """
    for name in names:
        value = (
            source.get(name, MISSING)
            if isinstance(source, Mapping) else
            getattr(source, name, MISSING)
        )

        if is_not_missing(value):
            return value

    return MISSING


def _serialize(value: Any) -> Any:  # noqa: ANN401
    match value:
        case dict():
            return filter_missing(value)
        case list() | tuple() | set():
            return [
                _serialize(i)
                for i in value]
        case Enum():
            return value.value
        case _MissingType():
            return MISSING

    return value


def filter_missing(data: dict) -> dict:
    filtered = {}

    for k, v in data.items():
        if is_not_missing(value := _serialize(v)):
            filtered[k] = value

    return filtered
