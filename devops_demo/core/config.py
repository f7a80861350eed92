from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    APP_NAME: str = "DevOps Demo"
    APP_VERSION: str = "1.0.0"
    # Environment designation: development | test | production.
    # NODE_ENV wins over the generic names.
    ENV: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV", "ENV"),
    )
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    SHUTDOWN_TIMEOUT_SECONDS: int = 10

    @property
    def is_development(self) -> bool:
        return self.ENV == "development"

    @property
    def is_test(self) -> bool:
        return self.ENV == "test"


settings = Settings()
