from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Quiz Admin"
    API_VERSION: str = "1.0.0"
    ENV: str = "development"

    MONGO_URL: str = "mongodb://mongodb:27017"
    MONGO_DB: str = "quiz_admin"

    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"


settings = Settings()
