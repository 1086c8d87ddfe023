"""Configuración del proyecto."""

import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


class SQLServerSettings(BaseSettings):
    # sin prefijo, USER y HOST del entorno pisarían los valores
    model_config = SettingsConfigDict(env_prefix="MSSQL_")

    driver: str = os.getenv("MSSQL_DRIVER", "ODBC Driver 17 for SQL Server")
    host: str = os.getenv("MSSQL_HOST", "localhost")
    port: int = int(os.getenv("MSSQL_PORT", "1433"))
    user: str = os.getenv("MSSQL_USER", "sa")
    password: str = os.getenv("MSSQL_PASSWORD", "")
    database: str = os.getenv("MSSQL_DATABASE", "master")
    # por defecto: confiar en el certificado del servidor, sin cifrado
    trust_server_certificate: bool = True
    encrypt: bool = False
    login_timeout: int = int(os.getenv("MSSQL_LOGIN_TIMEOUT", "15"))


class PaginationSettings(BaseSettings):
    default_schema: str = os.getenv("DEFAULT_SCHEMA", "dbo")
    timestamp_column: str = os.getenv("TIMESTAMP_COLUMN", "exchangeTime")
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "50"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "1000"))


class LogSettings(BaseSettings):
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Configuración global del proyecto"""

    app_name: str = "MSSQL Table Browser"
    debug: bool = False
    db: SQLServerSettings = SQLServerSettings()
    pagination: PaginationSettings = PaginationSettings()
    logs: LogSettings = LogSettings()


settings = Settings()
