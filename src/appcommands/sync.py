from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal
from dataclasses import dataclass, field

import logfire

from .compare import option_equals, options_equal
from .missing import is_not_missing, present
from .models import get_field
from .normalize import (
    resolve_default_permission,
    resolve_command_type
)
from .env import env

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .models import ApplicationCommand, RawBaseModel


__all__ = (
    'CommandUpdate',
    'diff_reasons',
    'plan_sync',
)


type LocalCommand = Mapping[str, Any] | RawBaseModel


@dataclass(frozen=True)
class CommandUpdate:
    method: Literal['POST', 'PATCH', 'DELETE']
    command: LocalCommand | ApplicationCommand
    reasons: list[str] = field(default_factory=list)
    live: ApplicationCommand | None = None
    """the live command this update targets, for PATCH and DELETE"""

    @property
    def name(self) -> str:
        return get_field(self.command, 'name')


def diff_reasons(
    existing: ApplicationCommand,
    command: LocalCommand,
    enforce_order: bool = False
) -> list[str]:
    """human readable list of what differs between a live command and a local one"""
    reasons = []

    command_id = present(get_field(command, 'id'))

    if command_id and str(command_id) != str(existing.id):
        reasons.append(f'id ({existing.id} != {command_id})')

    command_type = resolve_command_type(get_field(command, 'type'))

    if is_not_missing(command_type) and command_type != existing.type:
        reasons.append(f'type ({existing.type.name} != {command_type.name})')

    description = get_field(command, 'description')

    if is_not_missing(description) and description != existing.description:
        reasons.append(f'description ({existing.description!r} != {description!r})')

    default_permission = resolve_default_permission(command)

    if default_permission != existing.default_permission:
        reasons.append(
            f'default_permission ({existing.default_permission} != {default_permission})')

    options = present(get_field(command, 'options'))
    options = options if is_not_missing(options) else []

    if len(options) != len(existing.options):
        reasons.append(f'options (count {len(existing.options)} != {len(options)})')
        return reasons

    by_name = {
        get_field(option, 'name'): option
        for option in options
    }

    for existing_option in existing.options:
        if existing_option.name not in by_name:
            reasons.append(f'options ({existing_option.name} missing)')
        elif not option_equals(existing_option, by_name[existing_option.name], enforce_order):
            reasons.append(f'options ({existing_option.name} changed)')

    if (
        enforce_order and
        not any(reason.startswith('options') for reason in reasons) and
        not options_equal(existing.options, options, enforce_order)
    ):
        reasons.append('options (order)')

    return reasons


def plan_sync(
    local: Iterable[LocalCommand],
    live: Iterable[ApplicationCommand],
    enforce_option_order: bool | None = None
) -> list[CommandUpdate]:
    """
    work out which requests would bring the live commands in line with the local ones

    nothing is sent, the caller decides how to apply the updates
    """
    enforce_order = (
        env.enforce_option_order
        if enforce_option_order is None else
        enforce_option_order
    )

    local_commands = {
        get_field(command, 'name'): command
        for command in local
    }

    live_commands = {
        command.name: command
        for command in live
    }

    updates: list[CommandUpdate] = []

    with logfire.span(
        'planning command sync',
        local=len(local_commands),
        live=len(live_commands),
        enforce_order=enforce_order
    ):
        for name, command in local_commands.items():
            if name not in live_commands:
                logfire.debug('registering {command_name}', command_name=name)
                updates.append(CommandUpdate('POST', command))
                continue

            live_command = live_commands[name]

            if live_command.equals(command, enforce_order):
                continue

            reasons = diff_reasons(live_command, command, enforce_order)

            logfire.debug(
                'updating {command_name} ({reason})',
                command_name=name,
                reason=', '.join(reasons)
            )

            updates.append(CommandUpdate('PATCH', command, reasons, live_command))

        for name, command in live_commands.items():
            if name not in local_commands:
                logfire.debug('deleting {command_name}', command_name=name)
                updates.append(CommandUpdate('DELETE', command, live=command))

    return updates
