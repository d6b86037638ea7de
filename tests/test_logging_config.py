"""
Tests for component loggers and console sink configuration.
"""

import pytest

from tsedit.logging_config import get_logger, logger, setup_logging


@pytest.fixture
def records():
    collected = []
    handler_id = logger.add(lambda message: collected.append(message.record), level="DEBUG")
    yield collected
    logger.remove(handler_id)


class TestComponentLoggers:

    def test_component_is_bound(self, records):
        get_logger("manipulation").debug("shifted")

        assert records[-1]["extra"]["component"] == "manipulation"
        assert records[-1]["message"] == "shifted"

    def test_unbound_records_get_default_component(self, records):
        logger.info("plain")
        assert records[-1]["extra"]["component"] == "tsedit"

    def test_unknown_component(self):
        with pytest.raises(ValueError):
            get_logger("renderer")

    def test_edits_log_under_manipulation(self, make_file, records):
        sf = make_file("class A {}")
        sf.get_class_or_throw("A").set_is_exported(True)

        components = {record["extra"]["component"] for record in records}
        assert "manipulation" in components


class TestSetupLogging:

    def test_console_filtered_by_component(self, capsys):
        setup_logging(level="DEBUG", suppress_console=False, force=True, components=["symbols"])

        get_logger("manipulation").info("hidden line")
        get_logger("symbols").info("shown line")

        err = capsys.readouterr().err
        assert "shown line" in err
        assert "hidden line" not in err

    def test_level_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("TSEDIT_LOG_LEVEL", "warning")
        monkeypatch.delenv("TSEDIT_LOG_COMPONENTS", raising=False)
        setup_logging(suppress_console=False, force=True)

        get_logger("project").info("quiet")
        get_logger("project").warning("loud")

        err = capsys.readouterr().err
        assert "loud" in err
        assert "quiet" not in err

    def test_machine_mode_suppresses_console(self, monkeypatch, capsys):
        monkeypatch.setenv("TSEDIT_MACHINE_MODE", "1")
        setup_logging(force=True)

        get_logger("provider").warning("nothing")

        assert capsys.readouterr().err == ""
