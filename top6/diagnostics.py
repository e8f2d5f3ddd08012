"""Errors and warnings collected during a run, surfaced to operators."""

from dataclasses import dataclass, field

from .logging_config import get_logger

logger = get_logger('diagnostics')


@dataclass
class ErrorCollector:
    """
    Accumulates data anomalies found while processing.

    Warnings are recoverable anomalies (duplicate line-up entries,
    ambiguous modified scores, unknown divisions). Errors are integrity
    conflicts whose contribution was dropped. Nothing here raises.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def error(self, message: str) -> None:
        logger.error(message)
        self.errors.append(message)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def all_errors_and_warnings(self) -> list[str]:
        """Errors first, then warnings."""
        return [*self.errors, *self.warnings]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
