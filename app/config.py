from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Missing values are not validated; they end up as malformed upstream URLs.
    SHOPIFY_API_KEY: str = ""
    SHOPIFY_HOSTNAME: str = ""

    SHOPIFY_MAIN_COLLECTION_ID: str = "672049463622"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
