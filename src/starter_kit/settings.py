"""Installer settings data structures and loading.

Settings are read once at CLI entry point from ~/.starter-kit/config.toml
(or the file named by STARTER_KIT_CONFIG). Every key is optional; a missing
file means all defaults.

Example config.toml:

    package_index_url = "https://repo.packagist.org/p2/{package}.json"
    providers = ["github.com", "bitbucket.org", "gitlab.com"]
    probe_timeout = 5.0
    clear_paths = ["content", "users"]
    unresolved_policy = "skip"
    composer_binary = "composer"
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, cast

from starter_kit.errors import SettingsError
from starter_kit.models.config import is_relative_inside

UnresolvedPolicy = Literal["skip", "require"]

DEFAULT_PACKAGE_INDEX_URL = "https://repo.packagist.org/p2/{package}.json"
DEFAULT_PROVIDERS = ("github.com", "bitbucket.org", "gitlab.com")
DEFAULT_PROBE_TIMEOUT = 5.0
DEFAULT_CLEAR_PATHS = (
    "content",
    "users",
    "resources/blueprints",
    "resources/fieldsets",
    "resources/forms",
)


def validate_unresolved_policy(value: str) -> UnresolvedPolicy:
    """Validate and return unresolved dependency policy.

    Args:
        value: String to validate

    Returns:
        Valid UnresolvedPolicy

    Raises:
        ValueError: If value is not a valid policy
    """
    if value not in ("skip", "require"):
        raise ValueError(f"Invalid unresolved policy: {value}")
    return cast(UnresolvedPolicy, value)


@dataclass(frozen=True)
class InstallerSettings:
    """Immutable installer settings.

    Attributes:
        package_index_url: Public index endpoint; `{package}` is replaced by vendor/name
        providers: VCS hosts probed in priority order when the index misses
        probe_timeout: Seconds allowed per HTTP probe
        clear_paths: Project-relative content paths deleted by --clear-site
        unresolved_policy: "skip" leaves packages found nowhere out entirely,
            "require" still asks composer for them by name
        composer_binary: Executable used for composer require/remove
    """

    package_index_url: str = DEFAULT_PACKAGE_INDEX_URL
    providers: tuple[str, ...] = DEFAULT_PROVIDERS
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT
    clear_paths: tuple[str, ...] = DEFAULT_CLEAR_PATHS
    unresolved_policy: UnresolvedPolicy = "skip"
    composer_binary: str = "composer"


def get_settings_path() -> Path:
    """Get the settings file path, honoring STARTER_KIT_CONFIG."""
    override = os.environ.get("STARTER_KIT_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".starter-kit" / "config.toml"


def load_settings(config_path: Path) -> InstallerSettings:
    """Load installer settings from a TOML file.

    Args:
        config_path: Path to config.toml

    Returns:
        InstallerSettings, with defaults for anything not set (or everything
        if the file doesn't exist)

    Raises:
        SettingsError: If the file is not valid TOML or a value is malformed
    """
    if not config_path.exists():
        return InstallerSettings()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(config_path, str(e)) from e

    defaults = InstallerSettings()

    index_url = _get_str(data, "package_index_url", defaults.package_index_url, config_path)
    if "{package}" not in index_url:
        raise SettingsError(config_path, "package_index_url must contain {package}")

    providers = _get_str_list(data, "providers", defaults.providers, config_path)
    for host in providers:
        if "://" in host or "/" in host:
            raise SettingsError(config_path, f"provider [{host}] must be a bare host name")

    timeout = data.get("probe_timeout", defaults.probe_timeout)
    if isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0:
        raise SettingsError(config_path, "probe_timeout must be a positive number")

    policy_str = _get_str(data, "unresolved_policy", defaults.unresolved_policy, config_path)
    try:
        policy = validate_unresolved_policy(policy_str)
    except ValueError as e:
        raise SettingsError(config_path, str(e)) from e

    clear_paths = _get_str_list(data, "clear_paths", defaults.clear_paths, config_path)
    for relative in clear_paths:
        if not is_relative_inside(relative):
            msg = f"clear path [{relative}] must stay inside the project"
            raise SettingsError(config_path, msg)

    return InstallerSettings(
        package_index_url=index_url,
        providers=providers,
        probe_timeout=float(timeout),
        clear_paths=clear_paths,
        unresolved_policy=policy,
        composer_binary=_get_str(data, "composer_binary", defaults.composer_binary, config_path),
    )


def _get_str(data: dict[str, Any], key: str, default: str, config_path: Path) -> str:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(config_path, f"{key} must be a non-empty string")
    return value


def _get_str_list(
    data: dict[str, Any], key: str, default: tuple[str, ...], config_path: Path
) -> tuple[str, ...]:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) and v.strip() for v in value):
        raise SettingsError(config_path, f"{key} must be a list of non-empty strings")
    return tuple(value)
