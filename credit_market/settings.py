from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=(".env", ".env.production"), extra="ignore")

    ENVIRONMENT: str = "LOCAL"

    # SQLite file by default, any SQLAlchemy URL otherwise
    DATABASE_URL: str = "sqlite:///credit_market.db"
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    CORS_ALLOWED_ORIGINS: str = ""

    PASSWORD_HASH_SCHEME: str = "pbkdf2_sha256"
    PROFILING_ENABLED: bool = False

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins into a clean list."""
        if not self.CORS_ALLOWED_ORIGINS:
            return []
        return [
            o.strip().strip("'\"").rstrip("/")
            for o in self.CORS_ALLOWED_ORIGINS.split(",")
            if o.strip()
        ]


settings = Settings()
