from pydantic_settings import BaseSettings

from sipcalc.schemas.scenario import Region


class Settings(BaseSettings):
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL: str = "INFO"
    DEFAULT_REGION: Region = Region.INR

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
