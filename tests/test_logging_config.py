import logging

from step_counter_api.app.core import logging_config


def test_setup_logging_configures_root_and_uvicorn(monkeypatch, tmp_path):
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.setattr(logging_config, "_configured", False)
    logfile = tmp_path / "service.log"
    try:
        logging_config.setup_logging("debug", str(logfile))
        new_handlers = [h for h in root.handlers if h not in saved_handlers]
        assert len(new_handlers) == 2
        assert root.level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").propagate is True
        assert logging.getLogger("uvicorn.access").handlers == []

        logging_config.setup_logging("info")
        assert len([h for h in root.handlers if h not in saved_handlers]) == 2
    finally:
        for handler in root.handlers[:]:
            if handler not in saved_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(saved_level)


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.setattr(logging_config, "_configured", False)
    try:
        logging_config.setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers[:]:
            if handler not in saved_handlers:
                root.removeHandler(handler)
        root.setLevel(saved_level)
