import re
from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

_IDENTIFIER = re.compile(r"^[A-Za-z][A-Za-z0-9_$#]*(\.[A-Za-z][A-Za-z0-9_$#]*)?$")


class Settings(BaseSettings):
    """Application settings"""

    # App
    app_name: str = "Order Warehouse API"
    debug: bool = False
    log_level: str = "INFO"
    port: int = 3000

    # Oracle connection
    oracle_user: str = "ADMINDB"
    oracle_pass: str = "sql123"
    oracle_host: str = "localhost"
    oracle_port: int = 1521
    oracle_service: str = "FREEPDB1"

    # Full SQLAlchemy URL, overrides the oracle_* settings when set
    database_url: Optional[str] = None
    pool_size: int = 5
    max_overflow: int = 10

    # The schema belongs to the database; only create it for local runs and tests
    create_tables: bool = False

    # Warehouse
    etl_procedure: str = "PR_ETL_FULL_REFRESH"
    db_probe_sql: str = (
        "SELECT USER AS U, sys_context('USERENV','CON_NAME') AS PDB FROM dual"
    )

    # CORS
    allowed_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @field_validator("etl_procedure")
    @classmethod
    def procedure_must_be_identifier(cls, v: str) -> str:
        if not _IDENTIFIER.match(v):
            raise ValueError(f"invalid procedure name: {v!r}")
        return v

    @property
    def connect_string(self) -> str:
        return f"//{self.oracle_host}:{self.oracle_port}/{self.oracle_service}"

    @property
    def sqlalchemy_url(self):
        if self.database_url:
            return self.database_url
        return URL.create(
            "oracle+oracledb_async",
            username=self.oracle_user,
            password=self.oracle_pass,
            host=self.oracle_host,
            port=self.oracle_port,
            query={"service_name": self.oracle_service},
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
