from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

import logfire

from .missing import MISSING, is_not_missing, present
from .models import get_field
from .normalize import (
    resolve_default_permission,
    resolve_command_type,
    resolve_option_type,
    resolve_required,
    check_depth
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .models import ApplicationCommand, RawBaseModel


__all__ = (
    'choices_equal',
    'commands_equal',
    'option_equals',
    'options_equal',
)


type Raw = Mapping[str, Any] | RawBaseModel


def _differs(kind: str, name: str, field: str) -> Literal[False]:
    logfire.debug(
        '{kind} {name} differs on {field}',
        kind=kind,
        name=name,
        field=field
    )

    return False


def _length(value: Any) -> int | None:  # noqa: ANN401
    value = present(value)
    return len(value) if is_not_missing(value) else None


def commands_equal(
    existing: ApplicationCommand,
    command: Raw,
    enforce_order: bool = False
) -> bool:
    """
    whether `command` describes the same command as the canonical `existing`

    `command` may be raw (types as names or codes, fields left out) or
    canonical. differences are reported as False, only an unresolvable
    type raises.
    """
    command_id = present(get_field(command, 'id'))

    if command_id and str(command_id) != str(existing.id):
        return _differs('command', existing.name, 'id')

    command_type = resolve_command_type(get_field(command, 'type'))

    if get_field(command, 'name') != existing.name:
        return _differs('command', existing.name, 'name')

    description = get_field(command, 'description')

    if is_not_missing(description) and description != existing.description:
        return _differs('command', existing.name, 'description')

    if is_not_missing(command_type) and command_type != existing.type:
        return _differs('command', existing.name, 'type')

    options = present(get_field(command, 'options'))

    # ? absent and empty options are the same thing at this level
    if (_length(options) or 0) != (_length(existing.options) or 0):
        return _differs('command', existing.name, 'options')

    if resolve_default_permission(command) != existing.default_permission:
        return _differs('command', existing.name, 'default_permission')

    if is_not_missing(options):
        return options_equal(existing.options, options, enforce_order)

    return True


def options_equal(
    existing: Sequence[ApplicationCommand.Option],
    options: Sequence[Raw],
    enforce_order: bool = False,
    *,
    _depth: int = 1
) -> bool:
    check_depth(_depth)

    if len(existing) != len(options):
        return False

    if enforce_order:
        return all(
            option_equals(existing_option, option, enforce_order, _depth=_depth)
            for existing_option, option in zip(existing, options, strict=True)
        )

    # ? duplicate names aren't an error here, the last one wins
    by_name = {
        get_field(option, 'name'): option
        for option in options
    }

    for existing_option in existing:
        option = by_name.get(existing_option.name, MISSING)

        if not is_not_missing(option):
            return _differs('option', existing_option.name, 'presence')

        if not option_equals(existing_option, option, enforce_order, _depth=_depth):
            return False

    return True


def option_equals(
    existing: ApplicationCommand.Option,
    option: Raw,
    enforce_order: bool = False,
    *,
    _depth: int = 1
) -> bool:
    option_type = resolve_option_type(get_field(option, 'type'))

    if (
        get_field(option, 'name') != existing.name or
        option_type != existing.type or
        get_field(option, 'description') != existing.description
    ):
        return _differs('option', existing.name, 'name, type, or description')

    if resolve_required(get_field(option, 'required'), option_type) != existing.required:
        return _differs('option', existing.name, 'required')

    choices = present(get_field(option, 'choices'))
    options = present(get_field(option, 'options'))

    # ? unlike command options, absent and empty choices are different
    if _length(choices) != _length(existing.choices):
        return _differs('option', existing.name, 'choices')

    if _length(options) != _length(existing.options):
        return _differs('option', existing.name, 'options')

    if (
        is_not_missing(existing.choices) and
        not choices_equal(existing.choices, choices, enforce_order)
    ):
        return _differs('option', existing.name, 'choices')

    if is_not_missing(existing.options):
        return options_equal(
            existing.options,
            options,
            enforce_order,
            _depth=_depth + 1
        )

    return True


def choices_equal(
    existing: Sequence[ApplicationCommand.Option.Choice],
    choices: Sequence[Raw],
    enforce_order: bool = False
) -> bool:
    if len(existing) != len(choices):
        return False

    if enforce_order:
        return all(
            get_field(choice, 'name') == existing_choice.name and
            get_field(choice, 'value') == existing_choice.value
            for existing_choice, choice in zip(existing, choices, strict=True)
        )

    by_name = {
        get_field(choice, 'name'): choice
        for choice in choices
    }

    for existing_choice in existing:
        choice = by_name.get(existing_choice.name, MISSING)

        if (
            not is_not_missing(choice) or
            get_field(choice, 'value') != existing_choice.value
        ):
            return False

    return True
