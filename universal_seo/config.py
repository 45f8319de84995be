from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Universal SEO"
    app_version: str = "1.1.0"
    debug: bool = False
    environment: str = "development"

    # Storage settings
    meta_namespace: str = "gg_seo"
    settings_file: Path = Path("data/seo_settings.json")
    database_url: str = "sqlite:///./data/seo_meta.db"

    # Locale settings
    default_locale: str = "en_US"
    seo_post_types: list[str] = ["post", "page", "product"]

    # Output rewriting
    buffer_enabled: bool = True
    admin_path_prefix: str = "/admin"
    rest_path_prefix: str = "/api"
    ajax_path: str = "/admin-ajax"
    cron_path: str = "/cron"
    xmlrpc_path: str = "/xmlrpc"
    feed_paths: list[str] = ["/feed", "/rss", "/atom"]

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
