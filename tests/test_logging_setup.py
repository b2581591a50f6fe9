import logging
from logging.handlers import RotatingFileHandler

from visitorconf import logging_setup
from visitorconf.config import VisitorSettings, _env_int


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_visitorconf_handler", "")]


def test_env_int_clamps(monkeypatch):
    monkeypatch.setenv("VISITORCONF_TEST_INT", "100")
    assert _env_int("VISITORCONF_TEST_INT", 5, 1, 50) == 50
    monkeypatch.setenv("VISITORCONF_TEST_INT", "0")
    assert _env_int("VISITORCONF_TEST_INT", 5, 1, 50) == 1
    monkeypatch.setenv("VISITORCONF_TEST_INT", "junk")
    assert _env_int("VISITORCONF_TEST_INT", 5, 1, 50) == 5
    monkeypatch.delenv("VISITORCONF_TEST_INT")
    assert _env_int("VISITORCONF_TEST_INT", 5, 1, 50) == 5


def test_file_handler(tmp_path, clean_logging):
    log_file = tmp_path / "logs" / "visitor.log"
    settings = VisitorSettings(log_level="debug", log_file=str(log_file))
    logging_setup.configure_runtime_logging(settings)

    assert logging.getLogger().level == logging.DEBUG
    files = [h for h in _our_handlers() if isinstance(h, RotatingFileHandler)]
    assert len(files) == 1
    assert files[0].maxBytes == settings.log_max_bytes
    assert files[0].backupCount == settings.log_backup_count
    assert logging_setup.get_runtime_log_file() == log_file

    logging.getLogger("visitorconf.test").warning("hello file")
    for h in files:
        h.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")


def test_configured_once(tmp_path, clean_logging):
    settings = VisitorSettings(log_file=str(tmp_path / "a.log"))
    logging_setup.configure_runtime_logging(settings)
    count = len(_our_handlers())
    logging_setup.configure_runtime_logging(VisitorSettings(log_file=str(tmp_path / "b.log")))
    assert len(_our_handlers()) == count
    assert logging_setup.get_runtime_log_file() == tmp_path / "a.log"


def test_no_file_configured(clean_logging):
    logging_setup.configure_runtime_logging(VisitorSettings(log_level="warning", log_file=""))
    assert logging.getLogger().level == logging.WARNING
    assert not [h for h in _our_handlers() if isinstance(h, RotatingFileHandler)]
    assert logging_setup.get_runtime_log_file() is None


def test_unknown_level_falls_back(clean_logging):
    logging_setup.configure_runtime_logging(VisitorSettings(log_level="loud", log_file=""))
    assert logging.getLogger().level == logging.INFO


def test_reset_removes_handlers(tmp_path, clean_logging):
    logging_setup.configure_runtime_logging(VisitorSettings(log_file=str(tmp_path / "a.log")))
    assert _our_handlers()
    logging_setup.reset_runtime_logging()
    assert not _our_handlers()


def test_exported_from_package(tmp_path, clean_logging):
    import visitorconf

    for attr in ("configure_runtime_logging", "get_runtime_log_file", "CFG", "VisitorSettings"):
        assert attr in visitorconf.__all__
    assert isinstance(visitorconf.CFG, visitorconf.VisitorSettings)

    visitorconf.configure_runtime_logging(visitorconf.VisitorSettings(log_file=str(tmp_path / "v.log")))
    assert visitorconf.get_runtime_log_file() == tmp_path / "v.log"
