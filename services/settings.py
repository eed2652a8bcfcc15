"""
Application settings.
Values come from environment variables first, then Streamlit secrets,
then the built-in defaults.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

from fba.calculators.records import DEFAULT_REFERRAL_FEE_RATE, DEFAULT_VAT_RATE

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


class SettingsError(ValueError):
    """Raised when a configured value is invalid and has no safe fallback."""
    pass


@dataclass(frozen=True)
class AppSettings:
    app_title: str = "FBA Profit Calculator"
    default_vat_rate: str = DEFAULT_VAT_RATE
    default_referral_fee_rate: str = DEFAULT_REFERRAL_FEE_RATE
    currency_symbol: str = "€"
    default_theme: str = "light"
    log_level: str = "INFO"


def get_secret(name: str) -> Optional[str]:
    """Get a value from the environment or Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value
    return _secret_from_streamlit(name)


def _secret_from_streamlit(name: str) -> Optional[str]:
    try:
        import streamlit as st
        value = st.secrets.get(name)
    except Exception:
        # No secrets.toml or not running under Streamlit
        return None
    return None if value is None else str(value)


def load_settings() -> AppSettings:
    """
    Read all settings.

    Raises:
        SettingsError: If DEFAULT_THEME is not one of THEMES
    """
    defaults = AppSettings()

    theme = (get_secret("DEFAULT_THEME") or defaults.default_theme).strip().lower()
    if theme not in THEMES:
        raise SettingsError(f"DEFAULT_THEME must be one of {', '.join(THEMES)}, got '{theme}'")

    settings = AppSettings(
        app_title=get_secret("APP_TITLE") or defaults.app_title,
        default_vat_rate=get_secret("DEFAULT_VAT_RATE") or defaults.default_vat_rate,
        default_referral_fee_rate=(
            get_secret("DEFAULT_REFERRAL_FEE_RATE") or defaults.default_referral_fee_rate
        ),
        currency_symbol=get_secret("CURRENCY_SYMBOL") or defaults.currency_symbol,
        default_theme=theme,
        log_level=(get_secret("LOG_LEVEL") or defaults.log_level).strip().upper(),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


# ============================================================================
# Module-level settings instance (singleton pattern)
# ============================================================================
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get or create the settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads them."""
    global _settings
    _settings = None
