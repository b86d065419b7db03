# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides a typed config object to the persistence layer.
#
# CLASSES:
# --------
# - PrefStoreConfig (dataclass)
#     default_path: str        (default "preferences.save")
#     encoding: str            (default "utf-8")
#     echo_diagnostics: bool   (default True)
#
# FUNCTIONS:
# ----------
# - get_config() -> PrefStoreConfig
#     Load .env using python-dotenv, construct PrefStoreConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from prefstore.config import get_config
#   config = get_config()
#   print(config.default_path)
#
# ==============================================

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "on"}


@dataclass
class PrefStoreConfig:
    """Preference store configuration."""
    default_path: str = "preferences.save"
    encoding: str = "utf-8"
    echo_diagnostics: bool = True


# Singleton instance
_config_instance: Optional[PrefStoreConfig] = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUE_VARIANTS


def get_config() -> PrefStoreConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        PrefStoreConfig: Preference store configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # .env in the working directory; existing variables win
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    _config_instance = PrefStoreConfig(
        default_path=os.getenv("PREFSTORE_PATH", "preferences.save"),
        encoding=os.getenv("PREFSTORE_ENCODING", "utf-8"),
        echo_diagnostics=_env_flag("PREFSTORE_ECHO_DIAGNOSTICS", True),
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config_instance
    _config_instance = None
