from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    API_BASE_URL: str = "http://localhost:5000/api"
    HTTP_TIMEOUT_SECONDS: float = 10.0
    HTTP_RETRY_ATTEMPTS: int = 2  # first attempt + one retry

    BOOKING_GATEWAY: str = "http"  # "http" | "mock"

    CURRENCY_SYMBOL: str = "₹"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
