import pytest

from smp.utils.config import DEFAULT_SHELL, executor_settings, load_config
from smp.utils.logging import get_logger, setup_logger


def test_load_config_reads_yaml(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "executor:\n"
        "  shell: /bin/bash\n"
        "  timeout: 30\n"
        "retry:\n"
        "  max_retries: 5\n"
    )

    data = load_config(cfg_path)
    assert data["executor"]["shell"] == "/bin/bash"
    assert executor_settings(data) == {"shell": "/bin/bash", "timeout": 30.0, "max_retries": 5}


def test_load_config_empty_file(tmp_path):
    cfg_path = tmp_path / "empty.yaml"
    cfg_path.write_text("")
    assert load_config(cfg_path) == {}


def test_executor_settings_defaults():
    assert executor_settings(None) == {"shell": DEFAULT_SHELL, "timeout": None, "max_retries": 3}


def test_executor_settings_rejects_bad_timeout():
    with pytest.raises(ValueError):
        executor_settings({"executor": {"timeout": 0}})


def test_setup_logger_creates_file(tmp_path):
    log_path = tmp_path / "smp.log"
    logger = setup_logger(logfile=log_path, verbose=True)
    child = get_logger("smp.tests")

    child.debug("debug message")
    child.info("info message")

    for handler in logger.handlers:
        flush = getattr(handler, "flush", None)
        if callable(flush):
            flush()

    assert log_path.is_file()
    contents = log_path.read_text()
    assert "info message" in contents
    assert "debug message" in contents


@pytest.mark.parametrize("value", ["lots", 0, -2, None, True])
def test_executor_settings_rejects_bad_max_retries(value):
    with pytest.raises(ValueError):
        executor_settings({"retry": {"max_retries": value}})


def test_executor_settings_rejects_non_mapping_block():
    with pytest.raises(ValueError):
        executor_settings({"executor": "/bin/bash"})
