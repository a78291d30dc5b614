# io/search_logging.py
import json
import logging
import sys

from astar_state.search.hooks import NoopHooks


def _default_json_logger(name="astar_state", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for one search run.
    Closes and errors always log; individual offers only in debug mode, sampled.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._offers = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(
            getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}}
        )

    def _shape(self, wp) -> dict:
        loc = wp.location
        base = {"previous_cost": wp.previous_cost, "total_cost": wp.total_cost}
        if hasattr(loc, "x") and hasattr(loc, "y"):
            base.update(x=loc.x, y=loc.y)
        else:
            base["location"] = repr(loc)
        return base

    def _sampled(self) -> bool:
        self._offers += 1
        return self.debug and (self._offers % self.sample_every) == 0

    # --------------------------------------------------------

    def opened(self, wp, *, replaced: bool, open_size: int):
        if self._sampled():
            msg = "open_replace" if replaced else "open_insert"
            self._emit("DEBUG", msg, **self._shape(wp), open_size=open_size)

    def rejected(self, wp, *, current, open_size: int):
        if self._sampled():
            self._emit(
                "DEBUG",
                "open_reject",
                **self._shape(wp),
                current_cost=current.previous_cost,
                open_size=open_size,
            )

    def closed(self, wp, *, open_size: int, closed_size: int):
        self._emit("INFO", "close", **self._shape(wp), open_size=open_size, closed_size=closed_size)

    def error(self, loc, *, reason: str, **kw):
        self._emit("ERROR", "search_error", location=repr(loc), reason=reason, **kw)
