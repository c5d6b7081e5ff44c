"""Configuration loading from CLI and programmatic sources."""

import logging
from pathlib import Path
from dataclasses import replace
from meetingrisk.config.settings import (
    Settings, RiskSettings, MessagingSettings,
    FormattingSettings, LoggingSettings, LogLevel
)
from meetingrisk.domain.exceptions import ConfigurationError
from meetingrisk.formatting.money import DEFAULT_LOCALE
from meetingrisk.messaging.policy import CRITICAL_WASTE_THRESHOLD, GOOD_SCORE, MID_SCORE
from meetingrisk.risk.engine import DEFAULT_MAX_ANNUAL_WASTE

logger = logging.getLogger(__name__)

class ConfigurationLoader:
    """Loads configuration from CLI args and system defaults."""

    def load_from_cli_args(self, args) -> Settings:
        """Load configuration from CLI arguments."""
        try:
            settings = self.load_defaults()

            risk_updates = {}
            if getattr(args, 'max_annual_waste', None) is not None:
                risk_updates['max_annual_waste'] = args.max_annual_waste

            messaging_updates = {}
            if getattr(args, 'critical_waste_threshold', None) is not None:
                messaging_updates['critical_waste_threshold'] = args.critical_waste_threshold

            formatting_updates = {}
            if getattr(args, 'locale', None):
                formatting_updates['locale'] = args.locale

            logging_updates = {}
            if getattr(args, 'log_dir', None):
                logging_updates['log_dir'] = Path(args.log_dir)
            if getattr(args, 'log_level', None):
                logging_updates['level'] = LogLevel(args.log_level.upper())
            if getattr(args, 'debug', False):
                logging_updates['level'] = LogLevel.DEBUG
            if getattr(args, 'quiet', False):
                logging_updates['console_output'] = False

            return replace(
                settings,
                risk=replace(settings.risk, **risk_updates),
                messaging=replace(settings.messaging, **messaging_updates),
                formatting=replace(settings.formatting, **formatting_updates),
                logging=replace(settings.logging, **logging_updates),
                debug_mode=bool(getattr(args, 'debug', False)),
                dry_run=bool(getattr(args, 'dry_run', False)),
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from CLI arguments: {str(e)}"
            ) from e

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            risk=RiskSettings(max_annual_waste=DEFAULT_MAX_ANNUAL_WASTE),
            messaging=MessagingSettings(
                critical_waste_threshold=CRITICAL_WASTE_THRESHOLD,
                good_score=GOOD_SCORE,
                mid_score=MID_SCORE,
            ),
            formatting=FormattingSettings(locale=DEFAULT_LOCALE),
            logging=LoggingSettings(
                level=LogLevel.INFO,
                log_dir=None,
                console_output=True,
            ),
            debug_mode=False,
            dry_run=False,
        )

def configure_from_cli(args) -> Settings:
    """Main entry point to configure settings from CLI args."""
    loader = ConfigurationLoader()
    settings = loader.load_from_cli_args(args)
    settings.validate()
    return settings
