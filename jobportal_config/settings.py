from pydantic_settings import BaseSettings, SettingsConfigDict


class LoaderSettings(BaseSettings):
    # Where the loader itself looks for things; read from JOBPORTAL_* variables only
    ENV_FILE: str = ".env"
    ENV_FILE_ENCODING: str = "utf-8"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="JOBPORTAL_", extra="ignore")
