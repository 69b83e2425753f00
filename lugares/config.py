from enum import StrEnum

from pydantic_settings import BaseSettings


class Platform(StrEnum):
    ios = "ios"
    android = "android"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    places_api_base_url: str = "http://wafi.iit.cnr.it/openervm/api"
    default_location: str = "Barcelona"
    default_category: str = "attraction"
    platform: Platform = Platform.android
    intent_dispatcher: str = "client"  # "client" | "webbrowser"
    client_schemes: str = "http,https,tel,mailto,geo,maps"
    request_timeout: float = 30.0
    log_level: str = "INFO"

    @property
    def client_scheme_set(self) -> frozenset[str]:
        return frozenset(
            s.strip().lower() for s in self.client_schemes.split(",") if s.strip()
        )
