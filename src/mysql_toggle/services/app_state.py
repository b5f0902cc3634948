"""
App-wide state: the connection toggle controller. Single place for the UI to obtain it.
"""

from __future__ import annotations

from ..db.connection import ConnectionConfig, ConnectionFactory
from .connection_toggle import ConnectionToggleController
from .preferences import load_connection_config


class AppState:
    """Holds the application's controller. Create at startup; closing releases any open connection."""

    def __init__(self, config: ConnectionConfig | None = None, factory: ConnectionFactory | None = None) -> None:
        self.controller = ConnectionToggleController(
            config if config is not None else load_connection_config(),
            factory,
        )

    def close(self) -> None:
        self.controller.close()

    def __enter__(self) -> AppState:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
