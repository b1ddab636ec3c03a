import logging
import sys
from repairdesk.core.config import settings


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional entity and op fields."""
    def format(self, record):
        if not hasattr(record, 'entity'):
            record.entity = '-'
        if not hasattr(record, 'op'):
            record.op = '-'
        return super().format(record)


def configure_logging(level: str | None = None) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [entity=%(entity)s op=%(op)s] - %(message)s"
    ))
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        handlers=[handler],
    )
