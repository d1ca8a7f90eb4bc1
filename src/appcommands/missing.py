from __future__ import annotations

from typing import Any, Literal, TypeGuard, TYPE_CHECKING

from pydantic_core import CoreSchema, core_schema

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler


__all__ = (
    'MISSING',
    'Nullable',
    'Optional',
    '_MissingType',
    'is_not_missing',
    'present',
)


class _MissingType:
    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'MISSING'

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(
        self,
        _: Any  # noqa: ANN401
    ) -> _MissingType:
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.json_or_python_schema(
            # ? null in json is read as a field that was left out
            json_schema=core_schema.no_info_after_validator_function(
                lambda _: MISSING,
                core_schema.none_schema()
            ),
            python_schema=core_schema.is_instance_schema(cls),
        )


def is_not_missing[T](value: T | _MissingType) -> TypeGuard[T]:
    return not isinstance(value, _MissingType)


def present(value: Any) -> Any:  # noqa: ANN401
    """None from the wire means the same as a field that was left out"""
    return MISSING if value is None else value


MISSING = _MissingType()

type Optional[T] = T | _MissingType
type Nullable[T] = T | None
