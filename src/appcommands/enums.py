from __future__ import annotations

from typing import Self
from enum import Enum

from .errors import InvalidCommandType, InvalidOptionType, InvalidTypeError


__all__ = (
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
)


class ResolvableEnum(Enum):
    """enum that accepts either a member, its name, or its wire code"""
    __invalid__: type[InvalidTypeError] = InvalidTypeError

    @classmethod
    def resolve(cls, value: Self | str | int) -> Self:
        match value:
            case cls():
                return value
            case bool():
                # ? bool is an int subclass, never a valid code
                pass
            case str() if value in cls.__members__:
                return cls[value]
            case int() if value in cls._value2member_map_:
                return cls(value)

        raise cls.__invalid__(value)


class ApplicationCommandType(ResolvableEnum):
    __invalid__ = InvalidCommandType

    CHAT_INPUT = 1
    """Slash commands; a text-based command that shows up when a user types `/`"""
    USER = 2
    """A UI-based command that shows up when you right click or tap on a user"""
    MESSAGE = 3
    """A UI-based command that shows up when you right click or tap on a message"""

    def __str__(self) -> str:
        match self:
            case ApplicationCommandType.CHAT_INPUT:
                return '/'
            case ApplicationCommandType.USER:
                return 'USER '
            case ApplicationCommandType.MESSAGE:
                return 'MESSAGE '
            case _:
                return super().__str__()


class ApplicationCommandOptionType(ResolvableEnum):
    __invalid__ = InvalidOptionType

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    """Any integer between -2^53 and 2^53"""
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    """Includes all channel types + categories"""
    ROLE = 8
    MENTIONABLE = 9
    """Includes users and roles"""
    NUMBER = 10
    """Any double between -2^53 and 2^53"""
    ATTACHMENT = 11
    """attachment object"""

    @property
    def is_subcommand(self) -> bool:
        return self in {
            ApplicationCommandOptionType.SUB_COMMAND,
            ApplicationCommandOptionType.SUB_COMMAND_GROUP
        }
