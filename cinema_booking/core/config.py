from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Server
    API_PREFIX: str = "/api"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    DATA_DIR: str = "./data/db"

    # Client transport
    API_BASE_URL: str = "http://127.0.0.1:8000/api"
    API_TIMEOUT_SECONDS: float = 30.0
    API_RETRY_ATTEMPTS: int = 3
    API_RETRY_DELAY_SECONDS: float = 1.0
    CLIENT_PLATFORM: str = "python"

    # Booking flow
    PROFILE_PATH: str = "./data/user_data.json"
    OTP_EXPECTED_CODE: str = "123456"
    OTP_LENGTH: int = 6
    OTP_SEND_DELAY_SECONDS: float = 1.0
    OTP_VERIFY_DELAY_SECONDS: float = 1.5
    OTP_RESEND_COOLDOWN_SECONDS: int = 30
    BOOKING_WINDOW_DAYS: int = 7


settings = Settings()
