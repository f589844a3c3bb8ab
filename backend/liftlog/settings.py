from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DATABASE_URL: str = "sqlite:///./liftlog.db"

    # Write the workout row when it starts instead of only when it finishes,
    # so an interrupted workout can be resumed by load_current()
    PERSIST_ON_START: bool = False

    LOG_LEVEL: str = "INFO"
    API_VERSION: str = "dev"
    ALLOW_ORIGINS: str = "*"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allow_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
