"""Logging utilities for Ringselect."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers attached to the root logger by the last configure_logging() call
_installed_handlers: list[logging.Handler] = []


@dataclass
class SelectionStats:
    """Statistics from one ring selection run."""

    total_rings: int = 0
    excluded_count: int = 0
    included_count: int = 0
    reversed_count: int = 0

    @property
    def rejected_count(self) -> int:
        """Rings considered by the policy but not included."""
        return self.total_rings - self.excluded_count - self.included_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("ringselect")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SelectionLogger:
    """Logger for tracking ring decisions and selection statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("ringselect")
        self._stats = SelectionStats()

    def log_ring_excluded(self, ring_id: str) -> None:
        """Log a ring already handled by intersection processing."""
        self._logger.debug("Ring excluded by intersection", ring=ring_id)
        self._stats.total_rings += 1
        self._stats.excluded_count += 1

    def log_ring_decision(
        self,
        ring_id: str,
        source_index: int,
        area: float,
        within_code: int,
        included: bool,
        reversed_: bool,
    ) -> None:
        """Log the policy decision for one ring."""
        union_code = within_code * -1
        is_first = source_index == 0
        self._logger.debug(
            "Ring classified",
            ring=ring_id,
            area=area,
            within_code=within_code,
            union=union_code,
            intersection=within_code,
            first_minus_second=union_code * (1 if is_first else -1),
            second_minus_first=union_code * (-1 if is_first else 1),
            included=included,
            reversed=reversed_,
        )
        self._stats.total_rings += 1
        if included:
            self._stats.included_count += 1
            if reversed_:
                self._stats.reversed_count += 1

    def log_selection_complete(self, overlay: str) -> None:
        """Log the summary of a selection run."""
        self._logger.info(
            "Rings selected",
            overlay=overlay,
            total=self._stats.total_rings,
            excluded=self._stats.excluded_count,
            included=self._stats.included_count,
            reversed=self._stats.reversed_count,
        )

    @property
    def stats(self) -> SelectionStats:
        """Get current selection statistics."""
        return self._stats
