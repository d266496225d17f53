import json
import logging

from src.core.logging_config import LOG_FORMAT, SERVICE_NAME, CustomJsonFormatter, setup_logging


def test_formatter_emits_json_with_level_and_location():
    formatter = CustomJsonFormatter(LOG_FORMAT)
    record = logging.LogRecord("services.pattern_engine.engine", logging.WARNING, __file__, 12, "hello", None, None)

    payload = json.loads(formatter.format(record))
    assert payload["message"] == "hello"
    assert payload["level"] == "WARNING"
    assert payload["lineno"] == 12
    assert payload["name"] == "services.pattern_engine.engine"
    assert payload["service"] == SERVICE_NAME == "value-delivery"


def test_setup_logging_installs_one_handler():
    root_logger = logging.getLogger()
    setup_logging("DEBUG")
    setup_logging("DEBUG")

    json_handlers = [h for h in root_logger.handlers if isinstance(h.formatter, CustomJsonFormatter)]
    assert len(json_handlers) == 1
    assert root_logger.level == logging.DEBUG

    for handler in json_handlers:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)
