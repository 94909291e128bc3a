import logging

import pytest
import yaml


@pytest.fixture(autouse=True)
def reset_days_logger():
    """Drop handlers added by setup_logging so each test configures afresh."""
    logger = logging.getLogger("days")
    root_level = logging.getLogger().level
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    yield
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def write_config(tmp_path):
    """Write a config.yaml (log file inside tmp_path) and return its path."""
    def _write(**sections):
        config = {
            'logging': {'log_file': str(tmp_path / "days.log"), 'console_level': 'WARNING'},
            'runtime_paths': {'out_dir': str(tmp_path / "output")},
        }
        config.update(sections)
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump(config))
        return config_file
    return _write
