from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    HOST_TIMEZONE: str = "America/Chicago"
    BUSINESS_HOURS_START: int = 9
    BUSINESS_HOURS_END: int = 17
    EVENT_TYPE_ID: int = 123
    SLOT_INTERVAL_MINUTES: int = 30
    BOOKINGS_PER_PAGE: int = 5

    DATA_DIR: str = "./data"
    BOOKINGS_FILE: str = "bookings.json"
    STORE_PROVIDER: str = "json"
    SEED_DEMO_BOOKINGS: bool = True

    API_BASE_URL: str = "http://localhost:8000"


settings = Settings()
