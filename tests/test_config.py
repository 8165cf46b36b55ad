"""Tests for configuration handling"""

import pytest

from fmt_utils.config import Config


class TestConfig:
    """Test Config defaults and validation."""

    def test_defaults(self):
        """Test default values."""
        config = Config()
        assert config.strict is False
        assert config.output == "text"
        assert config.verbose is False
        assert config.debug is False

    def test_output_is_normalized(self):
        """Test output names are stripped and lower-cased."""
        assert Config(output=" JSON ").output == "json"

    def test_invalid_output(self):
        """Test unknown output formats are rejected."""
        with pytest.raises(ValueError, match="output must be one of"):
            Config(output="xml")

    def test_non_boolean_flag(self):
        """Test switches must be booleans."""
        with pytest.raises(ValueError, match="strict must be a boolean"):
            Config(strict="yes")

    def test_from_dict_ignores_unknown_keys(self, mock_config):
        """Test from_dict keeps only known fields."""
        mock_config["unknown"] = 42
        mock_config["strict"] = True
        config = Config.from_dict(mock_config)
        assert config.strict is True
        assert not hasattr(config, "unknown")

    def test_to_dict(self, mock_config):
        """Test to_dict mirrors the fields."""
        assert Config.from_dict(mock_config).to_dict() == mock_config

    def test_log_file_is_stripped(self):
        """Test log file paths are stripped of surrounding whitespace."""
        assert Config(log_file=" fmt.log ").log_file == "fmt.log"

    def test_empty_log_file(self):
        """Test an empty log file path is rejected."""
        with pytest.raises(ValueError, match="log_file must be a non-empty path"):
            Config(log_file="  ")
