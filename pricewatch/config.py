"""Runtime configuration: environment defaults overlaid by stored settings."""

import logging
import os
from dataclasses import dataclass, fields, replace

from pricewatch.errors import ConfigError, StoreError

logger = logging.getLogger(__name__)

CONFIG_KEY = "config"


@dataclass(frozen=True)
class ExtensionConfig:
    """Settings read by the checker on every sweep."""

    check_interval_minutes: int = 360
    price_drop_threshold_percent: float = 5.0
    max_history_entries: int = 50
    max_tracked_items: int = 50
    item_delay_seconds: float = 1.0
    notifications_enabled: bool = True


def _env_number(name: str, default, cast):
    val = os.environ.get(name)
    if val is None or val == "":
        return default
    try:
        return cast(val)
    except ValueError:
        logger.warning("%s=%r is not a valid number, using %s", name, val, default)
        return default


def _env_flag(name: str, default: bool) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes")


def config_from_env() -> ExtensionConfig:
    """Build defaults from environment variables (see .env.example)."""
    base = ExtensionConfig()
    return ExtensionConfig(
        check_interval_minutes=_env_number(
            "CHECK_INTERVAL_MINUTES", base.check_interval_minutes, int
        ),
        price_drop_threshold_percent=_env_number(
            "PRICE_DROP_THRESHOLD_PERCENT", base.price_drop_threshold_percent, float
        ),
        max_history_entries=_env_number(
            "MAX_HISTORY_ENTRIES", base.max_history_entries, int
        ),
        max_tracked_items=_env_number("MAX_TRACKED_ITEMS", base.max_tracked_items, int),
        item_delay_seconds=_env_number(
            "ITEM_DELAY_SECONDS", base.item_delay_seconds, float
        ),
        notifications_enabled=_env_flag(
            "NOTIFICATIONS_ENABLED", base.notifications_enabled
        ),
    )


def parse_config(raw, defaults: ExtensionConfig) -> ExtensionConfig:
    """
    Overlay a stored settings mapping onto ``defaults``.

    Unknown keys are ignored. Raises ConfigError for a non-mapping payload or
    for values that cannot be coerced to the field type or are out of range.
    """
    if raw is None:
        return defaults
    if not isinstance(raw, dict):
        raise ConfigError(f"stored config must be a mapping, got {type(raw).__name__}")

    changes = {}
    for f in fields(ExtensionConfig):
        if f.name not in raw:
            continue
        value = raw[f.name]
        default = getattr(defaults, f.name)
        try:
            if isinstance(default, bool):
                if not isinstance(value, bool):
                    raise TypeError("expected a boolean")
                changes[f.name] = value
            elif isinstance(default, int):
                changes[f.name] = int(value)
            else:
                changes[f.name] = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid value for {f.name}: {value!r} ({e})") from e

    config = replace(defaults, **changes)
    if config.max_history_entries < 1 or config.max_tracked_items < 1:
        raise ConfigError("history and tracked-item limits must be positive")
    if config.check_interval_minutes < 1:
        raise ConfigError("check_interval_minutes must be positive")
    if config.price_drop_threshold_percent < 0 or config.item_delay_seconds < 0:
        raise ConfigError("threshold and delay must not be negative")
    return config


def load_config(store, defaults: ExtensionConfig | None = None) -> ExtensionConfig:
    """
    Read the stored config, falling back to ``defaults`` when it is malformed
    or the store cannot be read.
    """
    defaults = defaults or config_from_env()
    try:
        raw = store.get_setting(CONFIG_KEY)
        return parse_config(raw, defaults)
    except ConfigError as e:
        logger.warning("Stored config ignored, using defaults: %s", e)
        return defaults
    except StoreError as e:
        logger.warning("Could not read stored config, using defaults: %s", e)
        return defaults
