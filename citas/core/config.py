from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Citas"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Database - single SQLite file
    DATABASE_URL: str = "sqlite:///./citas.db"

    # Front-end assets served at "/"
    STATIC_DIR: str = "public"

    # Confirmation notices
    NOTIFICATION_SENDER: str = "citas@localhost"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080", "http://testserver"]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        case_sensitive = True

# Create settings instance
settings = Settings()
