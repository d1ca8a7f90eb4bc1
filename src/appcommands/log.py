from __future__ import annotations

import logfire

from .env import env


__all__ = ('init_logging',)


def init_logging(service_name: str = 'appcommands') -> None:
    if not env.logfire_token:
        return

    logfire.configure(
        service_name=service_name + ('-dev' if env.dev else ''),
        token=env.logfire_token,
        environment='development' if env.dev else 'production',
        scrubbing=False if env.dev else None,
        console=False
    )
