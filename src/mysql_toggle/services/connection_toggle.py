"""
Connect/disconnect toggle: the two-state lifecycle around a single database connection.

Disconnected --activate()--> Connected      only if the open succeeds; otherwise stays Disconnected.
Connected    --activate()--> Disconnected   always; a failed close still drops the handle.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..db.connection import ConnectionConfig, ConnectionError, ConnectionFactory, MySQLConnectionFactory
from .display import DisplayLabels, labels_for
from .state import ConnectionState

logger = logging.getLogger(__name__)


class ConnectionToggleController:
    """
    Owns at most one open connection handle and the matching state.
    Not thread-safe: the caller must not invoke activate() again before it returns.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        factory: ConnectionFactory | None = None,
        on_state_changed: Callable[[ConnectionState], None] | None = None,
    ) -> None:
        self._config = config
        self._factory: ConnectionFactory = factory if factory is not None else MySQLConnectionFactory()
        self.on_state_changed = on_state_changed
        self._handle: Any = None
        self._state = ConnectionState.DISCONNECTED

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    @property
    def labels(self) -> DisplayLabels:
        return labels_for(self._state)

    def activate(self) -> ConnectionState:
        """
        Open the connection when disconnected, close it when connected.
        Returns the new state. Raises ConnectionError if the open or close failed;
        after a failed open the state is Disconnected, after a failed close it is Disconnected too.
        """
        if self._state is ConnectionState.CONNECTED:
            self._disconnect()
        else:
            self._connect()
        return self._state

    def close(self) -> None:
        """Release the connection if one is held. Close failures are logged, not raised."""
        if self._state is not ConnectionState.CONNECTED:
            return
        try:
            self._disconnect()
        except ConnectionError as e:
            logger.warning("Ignoring close failure on shutdown: %s", e)

    def _connect(self) -> None:
        target = self._config.describe()
        logger.info("Opening connection to %s", target)
        try:
            handle = self._factory.open(self._config)
        except Exception as e:
            logger.error("Open failed for %s: %s", target, e)
            raise ConnectionError(f"Could not connect to {target}: {e}", operation="open", cause=e) from e
        self._handle = handle
        self._set_state(ConnectionState.CONNECTED)

    def _disconnect(self) -> None:
        target = self._config.describe()
        handle, self._handle = self._handle, None
        logger.info("Closing connection to %s", target)
        try:
            self._factory.close(handle)
        except Exception as e:
            logger.error("Close failed for %s: %s", target, e)
            self._set_state(ConnectionState.DISCONNECTED)
            raise ConnectionError(f"Error while disconnecting from {target}: {e}", operation="close", cause=e) from e
        self._set_state(ConnectionState.DISCONNECTED)

    def _set_state(self, state: ConnectionState) -> None:
        self._state = state
        logger.info("Connection state: %s", state.value)
        if self.on_state_changed is not None:
            self.on_state_changed(state)
