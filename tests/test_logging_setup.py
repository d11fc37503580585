import json
import logging

from glyphterm.logging_setup import JsonFormatter, configure_logging, get_logger


def test_json_formatter_emits_one_object_per_record():
    record = logging.LogRecord("glyphterm.test", logging.WARNING, __file__, 1, "surface %s", ("lost",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "glyphterm.test"
    assert payload["msg"] == "surface lost"


def test_configure_logging_is_idempotent(tmp_path):
    logger = get_logger()
    saved = list(logger.handlers)
    logger.handlers.clear()
    try:
        log_file = tmp_path / "logs" / "glyphterm.log"
        first = configure_logging("debug", console=False, log_file=log_file)
        second = configure_logging("info", console=True)
        assert first is second
        assert len(first.handlers) == 1
        assert first.level == logging.DEBUG

        logging.getLogger("glyphterm.main_loop").info("toggling fullscreen")
        first.handlers[0].flush()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["msg"] == "toggling fullscreen"
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved
        logger.setLevel(logging.NOTSET)
