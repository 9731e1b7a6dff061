from pydantic_settings import BaseSettings, SettingsConfigDict

from forms_hubspot.config.hubspot_api import API_KEY_SETTING

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # HubSpot
    HUBSPOT_API_KEY: str | None = None
    HUBSPOT_BASE_URL: str = "https://api.hubapi.com/crm/v3/"

    # Runtime
    LOG_LEVEL: str = "INFO"
    PORT: int = 8099

    HTTP_TIMEOUT_S: int = 30

settings = Settings()


class SettingsConfiguration:
    """Configuration provider backed by environment settings.

    Hosts that keep plugin settings elsewhere pass their own object with a
    matching ``get_setting`` method.
    """

    SETTING_NAMES = {
        API_KEY_SETTING: "HUBSPOT_API_KEY",
    }

    def __init__(self, source: Settings | None = None):
        self.source = source or settings

    def get_setting(self, name: str) -> str | None:
        attr = self.SETTING_NAMES.get(name, name)
        value = getattr(self.source, attr, None)
        return str(value) if value is not None else None
