"""Service configuration.

Values come from environment variables, after any ``.env`` file found
from the working directory has been loaded without overriding variables
that are already set.
"""

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_FOUND_ENV = find_dotenv(usecwd=True)
if _FOUND_ENV:
    load_dotenv(dotenv_path=_FOUND_ENV, override=False)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = Field(default="Receipt Processor")
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080)
    LOG_LEVEL: str = Field(default="INFO")
    RELOAD: bool = Field(default=False)


settings = Settings()


def get_settings() -> Settings:
    return settings
