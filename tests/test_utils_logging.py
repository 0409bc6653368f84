from loguru import logger

from methodrouter.utils import logging as mr_logging


def test_configure_logging_writes_rotating_file(tmp_path):
    log_path = tmp_path / "logs" / "methodrouter.log"
    try:
        mr_logging.configure_logging("debug", log_file=log_path)
        assert log_path.parent.is_dir()
        assert str(log_path) in mr_logging._SINK_IDS
        assert "stderr" in mr_logging._SINK_IDS
    finally:
        mr_logging.reset_logging()

    assert mr_logging._SINK_IDS == {}


def test_configure_logging_replaces_previous_stderr_sink():
    try:
        mr_logging.configure_logging("INFO")
        first = mr_logging._SINK_IDS["stderr"]
        mr_logging.configure_logging("WARNING")
        second = mr_logging._SINK_IDS["stderr"]
        assert first != second
    finally:
        mr_logging.reset_logging()


def test_rotating_file_sink_is_added_once(tmp_path):
    path = tmp_path / "a.log"
    try:
        mr_logging.ensure_rotating_log_file(path)
        sink_id = mr_logging._SINK_IDS[str(path)]
        mr_logging.ensure_rotating_log_file(path)
        assert mr_logging._SINK_IDS[str(path)] == sink_id
    finally:
        mr_logging.reset_logging()


def test_library_logs_are_disabled_by_default():
    import methodrouter  # noqa: F401

    records = []
    sink_id = logger.add(lambda m: records.append(m), level="DEBUG")
    try:
        from methodrouter.router.registry import Router

        router = Router(None)
        router.add_route("dup", lambda _req: None)
        router.add_route("dup", lambda _req: None)
    finally:
        logger.remove(sink_id)
    assert records == []
