from __future__ import annotations

import logfire
import pytest

from appcommands import ApplicationCommand


logfire.configure(send_to_logfire=False, console=False)


PING = {
    'id': '1166880390843543582',
    'application_id': '1166880286010859561',
    'type': 1,
    'name': 'ping',
    'description': 'Pings',
    'default_permission': True
}

MEMBER = {
    'id': '1166880390843543583',
    'application_id': '1166880286010859561',
    'type': 1,
    'name': 'member',
    'description': 'manage members',
    'default_permission': True,
    'options': [
        {
            'type': 1,
            'name': 'new',
            'description': 'create a member',
            'options': [
                {
                    'type': 3,
                    'name': 'name',
                    'description': 'member name',
                    'required': True
                },
                {
                    'type': 3,
                    'name': 'pronouns',
                    'description': 'member pronouns'
                }
            ]
        },
        {
            'type': 2,
            'name': 'set',
            'description': 'edit a member',
            'options': [
                {
                    'type': 1,
                    'name': 'colour',
                    'description': 'set the member colour',
                    'options': [
                        {
                            'type': 4,
                            'name': 'colour',
                            'description': 'colour to use',
                            'required': True,
                            'choices': [
                                {'name': 'red', 'value': 0xff0000},
                                {'name': 'green', 'value': 0x00ff00}
                            ]
                        }
                    ]
                }
            ]
        }
    ]
}


@pytest.fixture
def ping() -> ApplicationCommand:
    return ApplicationCommand.from_data(PING)


@pytest.fixture
def member() -> ApplicationCommand:
    return ApplicationCommand.from_data(MEMBER)


@pytest.fixture
def member_definition() -> dict:
    """the member command the way it would be written locally"""
    return {
        'name': 'member',
        'description': 'manage members',
        'type': 'CHAT_INPUT',
        'options': [
            {
                'type': 'SUB_COMMAND',
                'name': 'new',
                'description': 'create a member',
                'options': [
                    {
                        'type': 'STRING',
                        'name': 'name',
                        'description': 'member name',
                        'required': True
                    },
                    {
                        'type': 'STRING',
                        'name': 'pronouns',
                        'description': 'member pronouns'
                    }
                ]
            },
            {
                'type': 'SUB_COMMAND_GROUP',
                'name': 'set',
                'description': 'edit a member',
                'options': [
                    {
                        'type': 'SUB_COMMAND',
                        'name': 'colour',
                        'description': 'set the member colour',
                        'options': [
                            {
                                'type': 'INTEGER',
                                'name': 'colour',
                                'description': 'colour to use',
                                'required': True,
                                'choices': [
                                    {'name': 'red', 'value': 0xff0000},
                                    {'name': 'green', 'value': 0x00ff00}
                                ]
                            }
                        ]
                    }
                ]
            }
        ]
    }
