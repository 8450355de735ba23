import os
from dataclasses import dataclass, field
from typing import List, Optional

from dynaconf import Dynaconf

from backend.app.constants import DEFAULTS
from flightpath.config.settings import SynthesisConfig


def load_settings(settings_file: Optional[str] = None) -> Dynaconf:
    """
    Settings from FLIGHTPATH_* environment variables, .env and an
    optional YAML/TOML/JSON file. Environment variables win over the file.
    """
    return Dynaconf(
        envvar_prefix="FLIGHTPATH",
        load_dotenv=True,
        settings_files=[settings_file] if settings_file else [],
    )


settings = load_settings(os.environ.get("FLIGHTPATH_SETTINGS_FILE"))


def _get(source: Dynaconf, key: str):
    return source.get(key, DEFAULTS[key])


def _parse_csv(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    return []


@dataclass(frozen=True)
class CorsConfig:
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    allowed_methods: List[str] = field(default_factory=lambda: ["GET", "OPTIONS"])
    allowed_headers: List[str] = field(default_factory=list)
    exposed_headers: List[str] = field(default_factory=list)
    allow_credentials: bool = False
    max_age: int = 300


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = DEFAULTS["APP_NAME"]
    api_prefix: str = DEFAULTS["API_PREFIX"]

    # ---------------- Server ----------------
    host: str = DEFAULTS["HOST"]
    port: int = DEFAULTS["PORT"]

    # ---------------- Logging ----------------
    log_level: str = DEFAULTS["LOG_LEVEL"]
    log_format: str = DEFAULTS["LOG_FORMAT"]

    # ---------------- Policy ----------------
    synthesis: SynthesisConfig = field(default_factory=SynthesisConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)

    @staticmethod
    def from_settings(source: Dynaconf = settings) -> "AppConfig":
        return AppConfig(
            app_name=str(_get(source, "APP_NAME")),
            api_prefix=str(_get(source, "API_PREFIX")).rstrip("/"),
            host=str(_get(source, "HOST")),
            port=int(_get(source, "PORT")),
            log_level=str(_get(source, "LOG_LEVEL")).upper(),
            log_format=str(_get(source, "LOG_FORMAT")),
            synthesis=SynthesisConfig(
                timeout_ms=float(_get(source, "REQUEST_TIMEOUT_MS")),
            ),
            cors=CorsConfig(
                allowed_origins=_parse_csv(_get(source, "CORS_ALLOWED_ORIGINS")),
                allowed_methods=_parse_csv(_get(source, "CORS_ALLOWED_METHODS")),
                allowed_headers=_parse_csv(_get(source, "CORS_ALLOWED_HEADERS")),
                exposed_headers=_parse_csv(_get(source, "CORS_EXPOSED_HEADERS")),
                allow_credentials=bool(_get(source, "CORS_ALLOW_CREDENTIALS")),
                max_age=int(_get(source, "CORS_MAX_AGE")),
            ),
        )
