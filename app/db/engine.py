# app/db/engine.py

from functools import cached_property

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.config import Settings


def build_engine(settings: Settings) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(settings.database_url, echo=settings.db_echo, future=True)


class AppContext:
    """Process-wide state shared by every handler: settings and the engine."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @cached_property
    def engine(self) -> Engine:
        # Built on first use, so importing the app never loads a DB driver
        return build_engine(self.settings)

    @property
    def engine_ready(self) -> bool:
        return "engine" in self.__dict__

    def dispose(self) -> None:
        if self.engine_ready:
            self.engine.dispose()


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_engine(request: Request) -> Engine:
    return get_context(request).engine
