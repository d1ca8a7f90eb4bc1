from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Protocol, Self
from datetime import datetime

from pydantic import Field, field_validator, model_validator

from appcommands.enums import ApplicationCommandOptionType, ApplicationCommandType
from appcommands.errors import UnattachedCommand
from appcommands.missing import MISSING, Optional, Nullable, is_not_missing
from appcommands.types import Snowflake

from .base import RawBaseModel, PydanticArbitraryType, filter_missing, get_field

if TYPE_CHECKING:
    from collections.abc import Mapping


__all__ = (
    'ApplicationCommand',
    'CommandManager',
)


class CommandManager(Protocol):
    async def edit(
        self,
        command: ApplicationCommand,
        data: Mapping[str, Any] | ApplicationCommand,
        guild_id: Snowflake | None
    ) -> ApplicationCommand:
        ...

    async def delete(
        self,
        command: ApplicationCommand,
        guild_id: Snowflake | None
    ) -> ApplicationCommand:
        ...


class ApplicationCommand(RawBaseModel):
    class Option(RawBaseModel):
        class Choice(RawBaseModel):
            name: str
            value: str | int | float

        type: ApplicationCommandOptionType
        """Type of option"""
        name: str
        """1-32 character name"""
        description: str
        """1-100 character description"""
        required: Optional[bool] = MISSING
        """Whether the parameter is required; absent for subcommands and subcommand groups"""
        choices: Optional[list[ApplicationCommand.Option.Choice]] = MISSING
        """Choices for the user to pick from, max 25"""
        options: Optional[list[ApplicationCommand.Option]] = MISSING
        """If the option is a subcommand or subcommand group type, these nested options will be the parameters or subcommands respectively"""

        @field_validator('type', mode='before')
        @classmethod
        def resolve_type(cls, value: Any) -> ApplicationCommandOptionType:  # noqa: ANN401
            return ApplicationCommandOptionType.resolve(value)

        @model_validator(mode='after')
        def default_required(self) -> Self:
            # ? only subcommands and groups may leave required out
            if not is_not_missing(self.required) and not self.type.is_subcommand:
                self.required = False

            return self

    id: Optional[Snowflake] = MISSING
    """Unique ID of command"""
    application_id: Optional[Snowflake] = MISSING
    """ID of the parent application"""
    guild_id: Nullable[Snowflake] = None
    """Guild ID of the command, if not global"""
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    """Type of command, defaults to `1` (ApplicationCommandType.CHAT_INPUT)"""
    name: str
    """Name of command, 1-32 characters"""
    description: str = ''
    """Description for `CHAT_INPUT` commands. Empty string for `USER` and `MESSAGE` commands"""
    options: list[ApplicationCommand.Option] = Field(default_factory=list)
    """Parameters for the command, max of 25"""
    default_permission: bool = True
    """Whether the command is enabled by default when the app is added to a guild"""
    # ? library stuff
    manager: Annotated[
        CommandManager,
        PydanticArbitraryType
    ] | None = Field(None, exclude=True, repr=False)

    @field_validator('type', mode='before')
    @classmethod
    def resolve_type(cls, value: Any) -> ApplicationCommandType:  # noqa: ANN401
        return ApplicationCommandType.resolve(value)

    @staticmethod
    def _patched_fields(data: Mapping[str, Any] | RawBaseModel) -> dict[str, Any]:
        from appcommands.normalize import normalize_option, resolve_default_permission

        return {
            'name': get_field(data, 'name'),
            'description': get_field(data, 'description') or '',
            'options': [
                normalize_option(option, received=True)
                for option in get_field(data, 'options') or []
            ],
            'default_permission': resolve_default_permission(data)
        }

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, Any],
        guild_id: Snowflake | int | None = None,
        manager: CommandManager | None = None
    ) -> ApplicationCommand:
        """build a canonical command from data sent by discord"""
        command_type = get_field(data, 'type')

        return cls(
            id=get_field(data, 'id'),
            application_id=get_field(data, 'application_id'),
            guild_id=(
                guild_id
                if guild_id is not None else
                get_field(data, 'guild_id') or None
            ),
            type=(
                command_type
                if is_not_missing(command_type) and command_type is not None
                else ApplicationCommandType.CHAT_INPUT
            ),
            manager=manager,
            **cls._patched_fields(data)
        )

    def patch(self, data: Mapping[str, Any] | RawBaseModel) -> None:
        for field, value in self._patched_fields(data).items():
            setattr(self, field, value)

    @property
    def timestamp(self) -> int:
        if not is_not_missing(self.id):
            raise ValueError('command has no id')

        return self.id.timestamp

    @property
    def created_at(self) -> datetime:
        if not is_not_missing(self.id):
            raise ValueError('command has no id')

        return self.id.created_at

    def equals(
        self,
        command: Mapping[str, Any] | RawBaseModel,
        enforce_option_order: bool = False
    ) -> bool:
        """
        whether this command is logically the same as `command`

        `command` may be a raw definition or another canonical command,
        it is never modified. comparing ids is much faster when that
        is all you need
        """
        from appcommands.compare import commands_equal
        return commands_equal(self, command, enforce_option_order)

    def _get_manager(self) -> CommandManager:
        if self.manager is None:
            raise UnattachedCommand(self.name)

        return self.manager

    async def edit(
        self,
        data: Mapping[str, Any] | ApplicationCommand
    ) -> ApplicationCommand:
        return await self._get_manager().edit(self, data, self.guild_id)

    async def delete(self) -> ApplicationCommand:
        return await self._get_manager().delete(self, self.guild_id)

    def as_payload(self) -> dict:
        json: dict = {
            'name': self.name,
            'description': self.description,
            'type': self.type.value,
            'default_permission': self.default_permission
        }

        if self.type == ApplicationCommandType.CHAT_INPUT:
            json['options'] = [
                option.as_payload()
                for option in self.options
            ]

        return filter_missing(json)
