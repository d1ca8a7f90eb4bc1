from __future__ import annotations

from typing import Any


__all__ = (
    'BaseAppCommandsException',
    'InvalidCommandType',
    'InvalidOptionType',
    'OptionDepthExceeded',
    'UnattachedCommand',
)


class BaseAppCommandsException(Exception):
    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)


class InvalidTypeError(BaseAppCommandsException):
    kind: str = 'type'

    def __init__(self, value: Any) -> None:  # noqa: ANN401
        self.value = value
        super().__init__(f'unknown {self.kind}: {value!r}')


class InvalidCommandType(InvalidTypeError):
    kind = 'application command type'


class InvalidOptionType(InvalidTypeError):
    kind = 'application command option type'


class OptionDepthExceeded(BaseAppCommandsException):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f'option tree is nested deeper than {limit} levels')


class UnattachedCommand(BaseAppCommandsException):
    def __init__(self, name: str) -> None:
        super().__init__(f'command {name!r} is not attached to a manager')
