from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # "local" runs against a seeded in-memory database,
    # anything else uses the file-backed DATABASE_URL.
    ENVIRONMENT: str = "production"
    DATABASE_URL: str = "sqlite:///./tripbooking.db"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")

    @property
    def use_memory_db(self) -> bool:
        return self.ENVIRONMENT.lower() == "local"


settings = Settings()
