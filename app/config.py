"""
Runtime configuration read from the environment.

Values may also come from a ``.env`` file in the working directory.
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    service_name: str = os.getenv("SERVICE_NAME", "API 3º Bimestre - Guilherme Carvalho Ruiz")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./marketplace.db")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    sql_echo: bool = _flag("SQL_ECHO")
    env: str = os.getenv("ENV", "production")

    @property
    def is_development(self) -> bool:
        return self.env != "production"


settings = Settings()
