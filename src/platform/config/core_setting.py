from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Exhibition Ticketing Client'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Upstream REST API
    UPSTREAM_API_URL: str = 'http://localhost:5000/api/v1'
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0
    GENERIC_ERROR_MESSAGE: str = 'Something went wrong, please try again'

    # Entry pass
    ENTRY_PASS_RATE: int = 100  # currency units per head
    PAYMENT_SIMULATION_DELAY_SECONDS: float = 1.2

    # Scanner
    SCAN_SESSION_MAX: int = 1000  # in-memory scan sessions kept per process

    @field_validator('ENTRY_PASS_RATE')
    @classmethod
    def validate_entry_pass_rate(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('ENTRY_PASS_RATE must be positive')
        return v


settings = Settings()  # type: ignore
