from typing import Self
from os import environ

from pydantic import BaseModel, Field


__all__ = ('Env', 'env',)


class Env(BaseModel):
    dev: bool
    enforce_option_order: bool
    max_option_depth: int = Field(ge=1)
    logfire_token: str

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'dev': environ.get('APPCOMMANDS_DEV', '1') != '0',
            'enforce_option_order': environ.get(
                'APPCOMMANDS_ENFORCE_OPTION_ORDER', '0') != '0',
            'max_option_depth': int(environ.get(
                'APPCOMMANDS_MAX_OPTION_DEPTH', '8')),
            'logfire_token': environ.get('LOGFIRE_TOKEN', '')
        })


env = Env.new()
