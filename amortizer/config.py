from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # API limits
    max_term_years: int = 50
    cors_allow_origins: list[str] = ["*"]


settings = Settings()
