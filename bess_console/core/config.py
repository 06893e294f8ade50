"""
Configurações da aplicação usando Pydantic Settings.

Carrega variáveis de ambiente e valida configurações necessárias.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configurações globais da aplicação."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Aplicação
    PROJECT_NAME: str = "BESS Solar API"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_V1_PREFIX: str = "/api/v1"
    ENVIRONMENT: str = "development"  # development, staging, production

    # CORS
    ALLOWED_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:8080"]

    # Sessão (marcador "user" guardado no navegador)
    SESSION_COOKIE_NAME: str = "user"
    SESSION_COOKIE_MAX_AGE: int | None = None  # None = cookie de sessão

    # Tabelas
    PAGE_SIZE: int = 5

    # Latência simulada de login e recuperação de senha
    SIMULATED_LATENCY_SECONDS: float = 1.0

    # Dashboard BESS
    DASHBOARD_DAYS: int = 30
    PEAK_TARIFF: float = 1.50  # R$ / kWh
    OFF_PEAK_TARIFF: float = 0.65  # R$ / kWh

    @field_validator("PAGE_SIZE", "DASHBOARD_DAYS")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Tamanhos de página e janelas precisam ser positivos."""
        if v < 1:
            raise ValueError("deve ser maior que zero")
        return v


@lru_cache
def get_settings() -> Settings:
    """Retorna instância cacheada das configurações."""
    return Settings()


settings = get_settings()
