from .enums import ApplicationCommandOptionType, ApplicationCommandType
from .models import ApplicationCommand, CommandManager
from .missing import MISSING, is_not_missing
from .types import Snowflake
from .normalize import (
    resolve_default_permission,
    resolve_command_type,
    resolve_option_type,
    resolve_required,
    normalize_option
)
from .compare import (
    commands_equal,
    options_equal,
    option_equals,
    choices_equal
)
from .sync import CommandUpdate, diff_reasons, plan_sync
from .errors import (
    BaseAppCommandsException,
    OptionDepthExceeded,
    InvalidCommandType,
    InvalidOptionType,
    UnattachedCommand
)
from .log import init_logging


__all__ = (
    'MISSING',
    'ApplicationCommand',
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
    'BaseAppCommandsException',
    'CommandManager',
    'CommandUpdate',
    'InvalidCommandType',
    'InvalidOptionType',
    'OptionDepthExceeded',
    'Snowflake',
    'UnattachedCommand',
    'choices_equal',
    'commands_equal',
    'diff_reasons',
    'init_logging',
    'is_not_missing',
    'normalize_option',
    'option_equals',
    'options_equal',
    'plan_sync',
    'resolve_command_type',
    'resolve_default_permission',
    'resolve_option_type',
    'resolve_required',
)
