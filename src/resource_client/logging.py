import logging
from typing import Any, Optional

LOG_EXTRA_FIELDS = (
    "method",
    "url",
    "path",
    "status",
    "duration_ms",
    "attempt",
)


class LogfmtFormatter(logging.Formatter):
    """logfmt lines: level, logger, event, then whichever extras are present."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("level", record.levelname.lower()),
            ("logger", record.name),
            ("event", record.getMessage() or None),
        ]
        pairs.extend((key, getattr(record, key, None)) for key in LOG_EXTRA_FIELDS)
        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))
            pairs.append(("exc", str(record.exc_info[1])))

        return " ".join(
            f"{key}={self._fmt_val(val)}" for key, val in pairs if val is not None
        )

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if not s or any(c in s for c in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO", logger_name: Optional[str] = None) -> None:
    """
    Send logfmt output to stderr for logger_name (root when None).
    Calling it again replaces the handler instead of stacking another.
    """
    target = logging.getLogger(logger_name)
    for h in list(target.handlers):
        target.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
