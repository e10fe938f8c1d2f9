from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RECURLY_",
        extra="ignore",
    )

    subdomain: str = ""
    api_key: str = ""
    base_url: str = ""  # Overrides the subdomain-derived URL when set

    api_version: str = "2.1"
    request_timeout: float = 30.0
    user_agent: str = "recurly-xml-python/0.1"

    @property
    def api_base_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/") + "/"
        return f"https://{self.subdomain}.recurly.com/v2/"


settings = Settings()
