"""Core configuration settings for meetingrisk."""

import math
import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
from enum import Enum

from babel import Locale, UnknownLocaleError

from meetingrisk.domain.exceptions import ConfigurationError
from meetingrisk.formatting.money import DEFAULT_LOCALE
from meetingrisk.messaging.policy import CRITICAL_WASTE_THRESHOLD, GOOD_SCORE, MID_SCORE
from meetingrisk.risk.engine import DEFAULT_MAX_ANNUAL_WASTE

logger = logging.getLogger(__name__)

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class RiskSettings:
    """Risk engine configuration."""
    max_annual_waste: float = DEFAULT_MAX_ANNUAL_WASTE

    def validate(self) -> None:
        """Validate risk settings."""
        if not math.isfinite(self.max_annual_waste) or self.max_annual_waste <= 0:
            raise ConfigurationError(
                "max_annual_waste must be a positive finite number",
                config_field="risk.max_annual_waste"
            ).add_suggestion(f"Default is {DEFAULT_MAX_ANNUAL_WASTE:,}")

@dataclass
class MessagingSettings:
    """Messaging policy thresholds."""
    critical_waste_threshold: float = CRITICAL_WASTE_THRESHOLD
    good_score: float = GOOD_SCORE
    mid_score: float = MID_SCORE

    def validate(self) -> None:
        """Validate messaging settings."""
        for name in ("good_score", "mid_score"):
            value = getattr(self, name)
            if not math.isfinite(value) or not 0 <= value <= 100:
                raise ConfigurationError(
                    f"{name} must be within 0..100",
                    config_field=f"messaging.{name}"
                )

        if self.mid_score >= self.good_score:
            raise ConfigurationError(
                "mid_score must be lower than good_score",
                config_field="messaging.mid_score"
            ).add_suggestion(f"Defaults are mid_score={MID_SCORE}, good_score={GOOD_SCORE}")

        threshold = self.critical_waste_threshold
        if not math.isfinite(threshold) or threshold < 0:
            raise ConfigurationError(
                "critical_waste_threshold must be a non-negative finite number",
                config_field="messaging.critical_waste_threshold"
            )

@dataclass
class FormattingSettings:
    """Money formatting configuration."""
    locale: str = DEFAULT_LOCALE

    def validate(self) -> None:
        """Validate the locale identifier against Babel's locale data."""
        try:
            Locale.parse(self.locale)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            raise ConfigurationError(
                f"Unknown locale: {self.locale}",
                config_field="formatting.locale"
            ).add_suggestion("Use a locale identifier such as en_US or de_DE") from e

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    log_dir: Optional[Path] = None
    console_output: bool = True

    def validate(self) -> None:
        """Validate logging settings."""
        if self.log_dir and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ConfigurationError(
                f"Log path is not a directory: {self.log_dir}",
                config_field="logging.log_dir"
            ).add_suggestion("Point --log-dir at a directory")

@dataclass
class Settings:
    """Main configuration settings for meetingrisk."""

    risk: RiskSettings = field(default_factory=RiskSettings)
    messaging: MessagingSettings = field(default_factory=MessagingSettings)
    formatting: FormattingSettings = field(default_factory=FormattingSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    # Debug/development settings
    debug_mode: bool = False
    dry_run: bool = False

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.risk.validate()
            self.messaging.validate()
            self.formatting.validate()
            self.logging.validate()

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'risk': {
                'max_annual_waste': self.risk.max_annual_waste,
            },
            'messaging': {
                'critical_waste_threshold': self.messaging.critical_waste_threshold,
                'good_score': self.messaging.good_score,
                'mid_score': self.messaging.mid_score,
            },
            'formatting': {
                'locale': self.formatting.locale,
            },
            'logging': {
                'level': self.logging.level.value,
                'log_dir': str(self.logging.log_dir) if self.logging.log_dir else None,
                'console_output': self.logging.console_output,
            },
            'runtime': {
                'debug_mode': self.debug_mode,
                'dry_run': self.dry_run,
            }
        }

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the current global settings instance."""
    if _settings is None:
        raise ConfigurationError(
            "Settings not initialized. Call set_settings() first."
        ).add_suggestion("Initialize settings in your application startup")
    return _settings

def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    settings.validate()  # Validate before setting
    _settings = settings
    logger.info("Configuration loaded and validated successfully")

def reset_settings() -> None:
    global _settings
    _settings = None
