import logging
import sys
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "value-delivery"
LOG_FORMAT = '%(timestamp)s %(level)s %(service)s %(name)s %(module)s %(lineno)d %(message)s'


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON log lines tagged with the value delivery service name."""
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['service'] = SERVICE_NAME
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def setup_logging(log_level_str: str = "INFO"):
    """
    Configures structured JSON logging for the value delivery service.
    Safe to call more than once: the JSON handler is only installed once.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not any(isinstance(h.formatter, CustomJsonFormatter) for h in root_logger.handlers):
        log_handler = logging.StreamHandler(sys.stdout)
        log_handler.setFormatter(CustomJsonFormatter(LOG_FORMAT))
        root_logger.addHandler(log_handler)
    root_logger.info(f"Value delivery logging configured with level: {logging.getLevelName(log_level)}")
