import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Any
from dotenv import load_dotenv


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    debug: bool = False


@dataclass
class MinIOConfig:
    """Object storage configuration."""

    endpoint: str = "s3.amazonaws.com"
    access_key: str = ""
    secret_key: str = ""
    secure: bool = True
    bucket: str = "openneo-uploads"
    region: Optional[str] = "us-east-1"


@dataclass
class OutfitApiConfig:
    """Upstream outfit GraphQL API configuration."""

    url: str = "https://impress-2020.openneo.net/api/graphql"
    timeout_seconds: float = 30.0


@dataclass
class RenderConfig:
    """Outfit rendering and compression configuration."""

    layer_timeout_seconds: float = 30.0
    palette_colors: int = 256
    optimize: bool = True


@dataclass
class BackupConfig:
    """Batch backup run configuration."""

    concurrency: int = 20
    list_retries: int = 10
    list_timeout_seconds: Optional[float] = None
    key_retries: int = 5
    key_timeout_seconds: Optional[float] = None
    backup_storage_class: str = "GLACIER"
    compressed_storage_class: str = "STANDARD_IA"
    acl: str = "public-read"
    # 0 sizes the outfit data cache at twice the concurrency
    fetch_cache_capacity: int = 0


@dataclass
class ResetConfig:
    """Tag reset run configuration."""

    concurrency: int = 30
    list_retries: int = 10
    list_timeout_seconds: Optional[float] = 5.0
    key_retries: int = 5
    key_timeout_seconds: Optional[float] = 10.0


@dataclass
class TracingConfig:
    """Span recording configuration."""

    enabled: bool = True
    slow_span_ms: float = 5000.0


@dataclass
class Config:
    """Main configuration container.

    This is the root config object that contains all sub-configurations.
    Similar to Go's Viper config struct.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    minio: MinIOConfig = field(default_factory=MinIOConfig)
    outfit_api: OutfitApiConfig = field(default_factory=OutfitApiConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    backup: BackupConfig = field(default_factory=BackupConfig)
    reset: ResetConfig = field(default_factory=ResetConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, str) and value.lower() in ("none", "null"):
        return None
    return float(value)


class ConfigLoader:
    """Viper-style configuration loader.

    Loads configuration from:
    1. YAML files (lowest priority)
    2. .env files
    3. Environment variables (highest priority)
    """

    def __init__(self):
        self.config_name = "config"
        self.config_paths = [".", "config", "/etc/outfit-archiver"]
        self.env_prefix = "OUTFIT_ARCHIVER"
        self.auto_env = True
        self._raw_config: Dict[str, Any] = {}

    def read_config(self) -> Config:
        """Read configuration from all sources.

        Returns:
            Config object with all settings
        """
        # Step 1: Load YAML config
        self._load_yaml()

        # Step 2: Load .env files
        self._load_env_files()

        # Step 3: Build Config object with env overrides
        config = self._build_config()

        # Step 4: Validate configuration
        self._validate(config)

        return config

    def _load_yaml(self) -> None:
        """Load YAML configuration file."""
        config_file = None

        for path in self.config_paths:
            for ext in ["yaml", "yml"]:
                file_path = Path(path) / f"{self.config_name}.{ext}"
                if file_path.exists():
                    config_file = file_path
                    break
            if config_file:
                break

        if not config_file:
            return

        with open(config_file, "r", encoding="utf-8") as f:
            self._raw_config = yaml.safe_load(f) or {}

    def _load_env_files(self) -> None:
        """Load .env files."""
        for env_file in [".env", ".env.local"]:
            for path in self.config_paths:
                env_path = Path(path) / env_file
                if env_path.exists():
                    load_dotenv(env_path, override=True)

    def _get_env(self, key: str, default: Any = None) -> Any:
        """Get value from environment variable.

        Converts nested key to env var:
        - "minio.bucket" -> "OUTFIT_ARCHIVER_MINIO_BUCKET"
        """
        if not self.auto_env:
            return default

        env_key = key.replace(".", "_").upper()
        if self.env_prefix:
            env_key = f"{self.env_prefix}_{env_key}"

        return os.getenv(env_key, default)

    def _get_value(
        self,
        key: str,
        default: Any = None,
        cast: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Get value with priority: env > yaml > default.

        Env values are converted to the type of ``default``; pass ``cast``
        for settings whose default is None.
        """
        env_value = self._get_env(key)
        if env_value is not None:
            if cast is not None:
                return cast(env_value)
            default_type = type(default)
            if default_type == bool:
                return env_value.lower() in ("true", "1", "yes")
            elif default_type == int:
                try:
                    return int(env_value)
                except ValueError:
                    return default
            elif default_type == float:
                try:
                    return float(env_value)
                except ValueError:
                    return default
            return env_value

        keys = key.split(".")
        value = self._raw_config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

        if value is None:
            return default
        return cast(value) if cast is not None else value

    def _build_config(self) -> Config:
        """Build Config object from loaded values."""
        return Config(
            logging=LoggingConfig(
                level=self._get_value("logging.level", "INFO"),
                debug=self._get_value("logging.debug", False),
            ),
            minio=MinIOConfig(
                endpoint=self._get_value("minio.endpoint", "s3.amazonaws.com"),
                access_key=self._get_value("minio.access_key", ""),
                secret_key=self._get_value("minio.secret_key", ""),
                secure=self._get_value("minio.secure", True),
                bucket=self._get_value("minio.bucket", "openneo-uploads"),
                region=self._get_value("minio.region", "us-east-1"),
            ),
            outfit_api=OutfitApiConfig(
                url=self._get_value(
                    "outfit_api.url", "https://impress-2020.openneo.net/api/graphql"
                ),
                timeout_seconds=self._get_value("outfit_api.timeout_seconds", 30.0),
            ),
            render=RenderConfig(
                layer_timeout_seconds=self._get_value("render.layer_timeout_seconds", 30.0),
                palette_colors=self._get_value("render.palette_colors", 256),
                optimize=self._get_value("render.optimize", True),
            ),
            backup=BackupConfig(
                concurrency=self._get_value("backup.concurrency", 20),
                list_retries=self._get_value("backup.list_retries", 10),
                list_timeout_seconds=self._get_value(
                    "backup.list_timeout_seconds", None, cast=_optional_float
                ),
                key_retries=self._get_value("backup.key_retries", 5),
                key_timeout_seconds=self._get_value(
                    "backup.key_timeout_seconds", None, cast=_optional_float
                ),
                backup_storage_class=self._get_value(
                    "backup.backup_storage_class", "GLACIER"
                ),
                compressed_storage_class=self._get_value(
                    "backup.compressed_storage_class", "STANDARD_IA"
                ),
                acl=self._get_value("backup.acl", "public-read"),
                fetch_cache_capacity=self._get_value("backup.fetch_cache_capacity", 0),
            ),
            reset=ResetConfig(
                concurrency=self._get_value("reset.concurrency", 30),
                list_retries=self._get_value("reset.list_retries", 10),
                list_timeout_seconds=self._get_value(
                    "reset.list_timeout_seconds", 5.0, cast=_optional_float
                ),
                key_retries=self._get_value("reset.key_retries", 5),
                key_timeout_seconds=self._get_value(
                    "reset.key_timeout_seconds", 10.0, cast=_optional_float
                ),
            ),
            tracing=TracingConfig(
                enabled=self._get_value("tracing.enabled", True),
                slow_span_ms=self._get_value("tracing.slow_span_ms", 5000.0),
            ),
        )

    def _validate(self, config: Config) -> None:
        """Validate configuration."""
        errors = []

        if not config.minio.endpoint:
            errors.append("minio.endpoint is required")

        if not config.minio.bucket:
            errors.append("minio.bucket is required")

        if config.backup.concurrency <= 0:
            errors.append("backup.concurrency must be positive")

        if config.reset.concurrency <= 0:
            errors.append("reset.concurrency must be positive")

        if errors:
            raise ValueError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


def load_config() -> Config:
    """Load configuration.

    Returns:
        Config object
    """
    return ConfigLoader().read_config()
