from .base import RawBaseModel, PydanticArbitraryType, filter_missing, get_field
from .command import ApplicationCommand, CommandManager


__all__ = (
    'ApplicationCommand',
    'CommandManager',
    'PydanticArbitraryType',
    'RawBaseModel',
    'filter_missing',
    'get_field',
)


ApplicationCommand.Option.Choice.model_rebuild()
ApplicationCommand.Option.model_rebuild()
ApplicationCommand.model_rebuild()
