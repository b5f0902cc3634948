"""
Connection target and connection factory over mysql-connector-python.
The factory is the only place that talks to the MySQL client; the controller only sees opaque handles.
"""

from __future__ import annotations

import builtins
from dataclasses import dataclass, fields
from typing import Any, Mapping, Protocol

import mysql.connector


DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3306
DEFAULT_DATABASE = "kccdb"
DEFAULT_USER = "root"
DEFAULT_CONNECT_TIMEOUT = 10


class ConnectionError(builtins.ConnectionError):
    """Opening or closing the database connection failed. `cause` is the underlying exception."""

    def __init__(self, message: str, *, operation: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.cause = cause


@dataclass(frozen=True)
class ConnectionConfig:
    """Where to connect. Recognized options: host, port, database, user, password, connect_timeout."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    database: str = DEFAULT_DATABASE
    user: str = DEFAULT_USER
    password: str = ""
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ConnectionConfig:
        """
        Build a config from a dict (e.g. the "connection" object in preferences.json).
        Unknown keys are ignored; missing keys keep defaults. Raises ValueError on invalid values.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, raw in data.items():
            if key not in known or raw is None:
                continue
            if key in ("port", "connect_timeout"):
                if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
                    raise ValueError(f"{key} must be an integer, got {raw!r}")
                try:
                    n = int(raw)
                except (TypeError, ValueError):
                    raise ValueError(f"{key} must be an integer, got {raw!r}") from None
                if key == "port" and not 0 < n < 65536:
                    raise ValueError(f"port out of range: {n}")
                if key == "connect_timeout" and n <= 0:
                    raise ValueError(f"connect_timeout must be positive: {n}")
                values[key] = n
            else:
                values[key] = str(raw)
        if "host" in values and not values["host"].strip():
            raise ValueError("host must not be empty")
        return cls(**values)

    def to_mapping(self, include_password: bool = False) -> dict[str, Any]:
        data = {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "user": self.user,
            "connect_timeout": self.connect_timeout,
        }
        if include_password:
            data["password"] = self.password
        return data

    def describe(self) -> str:
        """Human-readable target for logs and the status bar. Never includes the password."""
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class ConnectionFactory(Protocol):
    """Opens and closes connection handles. Any exception raised counts as failure."""

    def open(self, config: ConnectionConfig) -> Any: ...

    def close(self, handle: Any) -> None: ...


class MySQLConnectionFactory:
    """ConnectionFactory backed by mysql.connector."""

    def open(self, config: ConnectionConfig) -> Any:
        return mysql.connector.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
            connection_timeout=config.connect_timeout,
        )

    def close(self, handle: Any) -> None:
        handle.close()
