from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .enums import ApplicationCommandOptionType, ApplicationCommandType
from .missing import MISSING, Optional, is_not_missing, present
from .models import ApplicationCommand, RawBaseModel, get_field
from .errors import OptionDepthExceeded
from .env import env

if TYPE_CHECKING:
    from collections.abc import Mapping


__all__ = (
    'check_depth',
    'normalize_option',
    'resolve_command_type',
    'resolve_default_permission',
    'resolve_option_type',
    'resolve_required',
)


type RawOption = Mapping[str, Any] | RawBaseModel


def check_depth(depth: int) -> None:
    if depth > env.max_option_depth:
        raise OptionDepthExceeded(env.max_option_depth)


def resolve_command_type(value: Any) -> Optional[ApplicationCommandType]:  # noqa: ANN401
    if not is_not_missing(value := present(value)):
        return MISSING

    return ApplicationCommandType.resolve(value)


def resolve_option_type(value: Any) -> ApplicationCommandOptionType:  # noqa: ANN401
    # ? options always need a type, absent is just another invalid value
    return ApplicationCommandOptionType.resolve(value)


def resolve_required(
    required: Any,  # noqa: ANN401
    option_type: ApplicationCommandOptionType
) -> Optional[bool]:
    if is_not_missing(required := present(required)):
        return required

    # ? subcommands have no concept of required, keep it distinct from False
    return MISSING if option_type.is_subcommand else False


def resolve_default_permission(source: Mapping[str, Any] | RawBaseModel) -> bool:
    for name in ('defaultPermission', 'default_permission'):
        if is_not_missing(value := present(get_field(source, name))):
            return value

    return True


def normalize_option(
    raw: RawOption,
    received: bool = False,
    *,
    _depth: int = 1
) -> ApplicationCommand.Option:
    """
    build a canonical option from a raw option definition

    `raw` may be a mapping in either the authored shape (type as a name)
    or the shape discord sends (type as a wire code), or an option model.
    `received` marks data that came from discord and is carried through
    to nested options; the type is resolved the same way either way.

    `raw` is never modified.
    """
    check_depth(_depth)

    option_type = resolve_option_type(get_field(raw, 'type'))
    options = present(get_field(raw, 'options'))
    choices = present(get_field(raw, 'choices'))

    return ApplicationCommand.Option(
        type=option_type,
        name=get_field(raw, 'name'),
        description=get_field(raw, 'description'),
        required=resolve_required(get_field(raw, 'required'), option_type),
        choices=(
            [
                # ? each option owns its own choices
                choice.model_dump() if isinstance(choice, RawBaseModel) else choice
                for choice in choices
            ]
            if is_not_missing(choices) else
            MISSING
        ),
        options=(
            [
                normalize_option(option, received, _depth=_depth + 1)
                for option in options
            ]
            if is_not_missing(options) else
            MISSING
        )
    )
