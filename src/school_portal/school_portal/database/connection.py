from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    charset: str = "utf8mb4"
    connection_timeout: int = 10

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "school_portal")),
            charset=str(db_config.get("charset", "utf8mb4")),
            connection_timeout=int(db_config.get("connection_timeout", 10)),
        )

    def connect_kwargs(self, *, with_database: bool = True) -> dict:
        kwargs = dict(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            charset=self.charset,
            connection_timeout=self.connection_timeout,
            use_pure=True,
        )
        if with_database:
            kwargs["database"] = self.database
        return kwargs


class DatabaseConnection:
    """Connection factory shared by the MySQL repositories.

    One factory per distinct config; every ``connect()`` opens a fresh
    connection that the caller closes (see ``db_cursor``).
    """

    _instances: Dict[DBConfig, "DatabaseConnection"] = {}

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        instance: Optional[DatabaseConnection] = cls._instances.get(config)
        if instance is None:
            instance = cls._instances[config] = DatabaseConnection(config)
        return instance

    def connect(self):
        return mysql.connector.connect(**self._config.connect_kwargs())
