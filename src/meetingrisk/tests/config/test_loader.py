from argparse import Namespace
from pathlib import Path

import pytest

from meetingrisk.config.loader import ConfigurationLoader, configure_from_cli
from meetingrisk.config.settings import LogLevel
from meetingrisk.domain.exceptions import ConfigurationError


class TestConfigurationLoader:

    def test_load_defaults(self):
        settings = ConfigurationLoader().load_defaults()

        assert settings.risk.max_annual_waste == 250_000
        assert settings.messaging.critical_waste_threshold == 2000
        assert settings.messaging.good_score == 80
        assert settings.messaging.mid_score == 50
        assert settings.formatting.locale == "en_US"
        assert settings.logging.level == LogLevel.INFO
        assert settings.logging.log_dir is None
        assert settings.logging.console_output is True
        assert settings.debug_mode is False
        assert settings.dry_run is False

    def test_empty_namespace_gives_defaults(self):
        settings = ConfigurationLoader().load_from_cli_args(Namespace())
        assert settings == ConfigurationLoader().load_defaults()

    def test_overrides(self, tmp_path):
        args = Namespace(
            max_annual_waste=1000.0,
            critical_waste_threshold=500.0,
            locale="de_DE",
            log_dir=str(tmp_path),
            debug=True,
            dry_run=True,
            quiet=True,
        )
        settings = ConfigurationLoader().load_from_cli_args(args)

        assert settings.risk.max_annual_waste == 1000.0
        assert settings.messaging.critical_waste_threshold == 500.0
        assert settings.formatting.locale == "de_DE"
        assert settings.logging.log_dir == Path(tmp_path)
        assert settings.logging.level == LogLevel.DEBUG
        assert settings.logging.console_output is False
        assert settings.debug_mode is True
        assert settings.dry_run is True

    def test_log_level(self):
        settings = ConfigurationLoader().load_from_cli_args(Namespace(log_level="error"))
        assert settings.logging.level == LogLevel.ERROR

    def test_debug_overrides_log_level(self):
        args = Namespace(log_level="ERROR", debug=True)
        assert ConfigurationLoader().load_from_cli_args(args).logging.level == LogLevel.DEBUG

    def test_none_values_are_ignored(self):
        args = Namespace(max_annual_waste=None, locale=None, critical_waste_threshold=None)
        settings = ConfigurationLoader().load_from_cli_args(args)
        assert settings.risk.max_annual_waste == 250_000
        assert settings.formatting.locale == "en_US"


class TestConfigureFromCli:

    def test_valid(self):
        settings = configure_from_cli(Namespace(locale="en_GB"))
        assert settings.formatting.locale == "en_GB"

    def test_invalid_values_fail_validation(self):
        with pytest.raises(ConfigurationError):
            configure_from_cli(Namespace(max_annual_waste=-1.0))

    @pytest.mark.parametrize("args", [
        Namespace(max_annual_waste=float("inf")),
        Namespace(max_annual_waste=float("nan")),
        Namespace(critical_waste_threshold=float("nan")),
    ])
    def test_non_finite_values_fail_validation(self, args):
        with pytest.raises(ConfigurationError):
            configure_from_cli(args)

    def test_invalid_locale_fails_validation(self):
        with pytest.raises(ConfigurationError) as exc_info:
            configure_from_cli(Namespace(locale="xx_YY"))
        assert "Unknown locale" in str(exc_info.value)
