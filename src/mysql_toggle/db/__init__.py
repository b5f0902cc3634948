from .connection import (
    ConnectionConfig,
    ConnectionError,
    ConnectionFactory,
    MySQLConnectionFactory,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_DATABASE,
    DEFAULT_USER,
    DEFAULT_CONNECT_TIMEOUT,
)

__all__ = [
    "ConnectionConfig",
    "ConnectionError",
    "ConnectionFactory",
    "MySQLConnectionFactory",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_DATABASE",
    "DEFAULT_USER",
    "DEFAULT_CONNECT_TIMEOUT",
]
