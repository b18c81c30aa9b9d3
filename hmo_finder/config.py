"""Configuration management for hmo-finder."""

from dataclasses import dataclass, field

from hmo_finder.exceptions import ConfigurationError


@dataclass
class SearchPolicy:
    """Thresholds for the relaxed filter and backfill pipeline.

    The defaults reproduce the listing behaviour of the web client: filters
    are loosened by a fixed margin and discarded when they would leave too
    few results, and thin result sets are padded from the full snapshot.
    """

    price_tolerance: int = 50_000
    size_relaxation: int = 20
    size_floor: int = 70
    min_narrowed_results: int = 3
    min_results: int = 6
    min_backfill: int = 2
    small_store_cap: int = 8


@dataclass
class RefreshConfig:
    """Background refresh configuration."""

    enabled: bool = True
    interval_seconds: float = 120.0
    initial_delay_seconds: float = 30.0
    default_city: str = "Birmingham"
    max_price: int = 500_000
    min_size: int = 90


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class HmoFinderConfig:
    """Main configuration for hmo-finder."""

    search: SearchPolicy = field(default_factory=SearchPolicy)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    max_logged_searches: int = 500
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "HmoFinderConfig":
        """Create config from environment variables."""
        import os

        server = ServerConfig(
            host=os.getenv("HMO_HOST", "0.0.0.0"),
            port=_int_env("HMO_PORT", "8000"),
            cors_origins=[
                origin.strip()
                for origin in os.getenv("HMO_CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ],
        )

        refresh = RefreshConfig(
            enabled=os.getenv("HMO_AUTO_REFRESH", "true").lower() == "true",
            interval_seconds=_float_env("HMO_REFRESH_INTERVAL", "120"),
            initial_delay_seconds=_float_env("HMO_REFRESH_INITIAL_DELAY", "30"),
            default_city=os.getenv("HMO_DEFAULT_CITY", "Birmingham"),
        )
        if refresh.interval_seconds <= 0:
            raise ConfigurationError("HMO_REFRESH_INTERVAL must be positive")
        if refresh.initial_delay_seconds < 0:
            raise ConfigurationError("HMO_REFRESH_INITIAL_DELAY must not be negative")

        return cls(
            server=server,
            refresh=refresh,
            seed=_int_env("HMO_SEED", None) if os.getenv("HMO_SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: str | None) -> int:
    import os

    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _float_env(name: str, default: str) -> float:
    import os

    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
