"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
    DB_DATABASE: str = os.getenv("DB_NAME", "catalog_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    # Served when the store cannot be reached
    SAMPLE_CATALOG_PATH: str = os.getenv(
        "SAMPLE_CATALOG_PATH", os.path.join(os.path.dirname(__file__), "sample_catalog.json")
    )

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
