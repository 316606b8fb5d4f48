from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    AJAX_URL: str | None = None
    AJAX_NONCE: str = ""
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    ANALYTICS_ENABLED: bool = False

    CURRENCY_CODE: str = "EUR"
    CURRENCY_SYMBOL: str = "€"
    DECIMAL_SEPARATOR: str = ","
    THOUSANDS_SEPARATOR: str = "."

    MSG_SELECT_SLOT: str = "select a slot"
    MSG_NO_PARTICIPANTS: str = "at least one participant required"
    MSG_GIFT_RECIPIENT_MISSING: str = "enter the gift recipient's name"
    MSG_NO_SLOTS: str = "no slots available"
    MSG_ADDED_TO_CART: str = "added to cart"
    MSG_GENERIC_ERROR: str = "could not add the booking to the cart"
    MSG_CONNECTION_ERROR: str = "connection error, please retry"


settings = Settings()
