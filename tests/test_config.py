"""
Tests for config and logging_config modules.
"""

import logging

import pytest
from stat_functions import config
from stat_functions.logging_config import setup_logging


class TestLoadConfig:
    """YAML files are merged over the defaults."""

    def test_partial_overlay(self, tmp_path):
        path = tmp_path / "stat_functions.yaml"
        path.write_text("plot:\n  style:\n    color: blue\n")

        loaded = config.load_config(path)
        assert loaded["plot"]["style"] == {"color": "blue", "linewidth": 1.5}
        assert loaded["trimmed_mean"]["trim"] == 1
        assert loaded["plot"]["n_points"] == 201

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert config.load_config(path) == config.DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            config.load_config(tmp_path / "missing.yaml")

    def test_unknown_section(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("histogram:\n  bins: 10\n")
        with pytest.raises(ValueError, match="histogram"):
            config.load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            config.load_config(path)

    def test_defaults_are_not_mutated(self, tmp_path):
        path = tmp_path / "trim.yaml"
        path.write_text("trimmed_mean:\n  trim: 4\n")
        config.load_config(path)
        assert config.DEFAULT_CONFIG["trimmed_mean"]["trim"] == 1


class TestActiveConfig:
    """set_config / reset_config change what the functions fall back to."""

    def test_set_and_reset(self):
        config.set_config({"trimmed_mean": {"trim": 3}})
        assert config.get_config()["trimmed_mean"]["trim"] == 3
        assert config.get_config()["t_test"]["alternative"] == "two-sided"

        config.reset_config()
        assert config.get_config() == config.DEFAULT_CONFIG

    def test_set_config_rejects_unknown_section(self):
        with pytest.raises(ValueError, match="trimed_mean"):
            config.set_config({"trimed_mean": {"trim": 3}})
        assert config.get_config() == config.DEFAULT_CONFIG

    def test_hints_use_builtin_generics(self):
        """typing.Dict hints are deprecated under the package-wide type checks."""
        for func in (
            config.load_config,
            config.validate_config,
            config.get_config,
            config.set_config,
        ):
            for hint in func.__annotations__.values():
                assert "typing.Dict" not in str(hint), func.__name__

    def test_validate_config(self):
        assert config.validate_config(config.DEFAULT_CONFIG, ["plot.style.color"])
        with pytest.raises(ValueError, match="plot.style.marker"):
            config.validate_config(config.DEFAULT_CONFIG, ["plot.style.marker"])


class TestSetupLogging:
    """Logger setup for the package namespace."""

    @pytest.fixture(autouse=True)
    def reset_package_logger(self):
        yield
        logger = logging.getLogger("stat_functions")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_handlers_are_not_duplicated(self):
        setup_logging(level=logging.DEBUG)
        setup_logging(level=logging.DEBUG)
        logger = logging.getLogger("stat_functions")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "stat_functions.log"
        setup_logging(level=logging.INFO, log_file=str(log_file))
        logger = logging.getLogger("stat_functions")
        assert len(logger.handlers) == 2

        logging.getLogger("stat_functions.compute").info("trimmed")
        for handler in logger.handlers:
            handler.flush()
        assert "stat_functions.compute - INFO - trimmed" in log_file.read_text()

    def test_repeated_setup_closes_previous_file(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "first.log"))
        logger = logging.getLogger("stat_functions")
        (first_handler,) = [
            h for h in logger.handlers if isinstance(h, logging.FileHandler)
        ]
        first_stream = first_handler.stream

        setup_logging(log_file=str(tmp_path / "second.log"))
        assert first_stream.closed
        assert first_handler not in logger.handlers
        assert len(logger.handlers) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
