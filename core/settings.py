from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class CustomSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


class AppSettings(CustomSettings):
    ENVIRONMENT: Literal["local", "dev", "prod"] = Field(default="local")
    LOG_LEVEL: str = Field(default="INFO")
    JSON_LOGS: bool = Field(default=False)
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3001)


class MongoSettings(CustomSettings):
    """Document store configuration.

    Env vars:
    - MONGODB_URI
    - MONGODB_DB
    - MONGODB_TIMEOUT_MS: client-side timeout applied to every store operation
    - STORE_BACKEND: ``mongo`` or ``memory`` (development/tests)
    """

    MONGODB_URI: str = Field(default="mongodb://localhost:27017")
    MONGODB_DB: str = Field(default="fusion_ai")
    MONGODB_TIMEOUT_MS: int = Field(default=5000)
    STORE_BACKEND: Literal["mongo", "memory"] = Field(default="mongo")


class GroqSettings(CustomSettings):
    """Configuration for the Groq chat completions proxy.

    The key is also read from ``VITE_GROQ_API_KEY`` so a frontend ``.env`` can be
    shared with the backend.
    """

    GROQ_API_KEY: SecretStr = Field(
        default="",
        validation_alias=AliasChoices("GROQ_API_KEY", "VITE_GROQ_API_KEY"),
    )
    GROQ_BASE_URL: str = Field(default="https://api.groq.com/openai/v1")
    GROQ_MODEL: str = Field(default="llama-3.1-8b-instant")
    GROQ_TIMEOUT_SECONDS: float = Field(default=30.0)


class GoogleSettings(CustomSettings):
    GOOGLE_CLIENT_ID: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_CLIENT_ID", "VITE_GOOGLE_CLIENT_ID"),
    )


class CorsSettings(CustomSettings):
    FRONTEND_URL: str = Field(default="http://localhost:5173")
    LOCAL_DEV_ORIGIN: str = Field(default="http://localhost:5173")


class Settings(BaseModel):
    APP: AppSettings = Field(default_factory=AppSettings)
    MONGODB: MongoSettings = Field(default_factory=MongoSettings)
    GROQ: GroqSettings = Field(default_factory=GroqSettings)
    GOOGLE: GoogleSettings = Field(default_factory=GoogleSettings)
    CORS: CorsSettings = Field(default_factory=CorsSettings)


@lru_cache
def get_settings() -> Settings:
    return Settings()


SETTINGS = get_settings()
