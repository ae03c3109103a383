"""Error aggregation for batches of independent work.

When each key is an independent unit of work, one failure should not stop
the others. Failures are collected in input order and handed back together
with a summary.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, Iterable, List, Tuple, TypeVar

from mintprep.common import MintPrepError, classify_error

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')
R = TypeVar('R')


@dataclass(frozen=True)
class BatchFailure:
    """A key that could not be processed."""
    key: str
    category: str
    message: str


@dataclass
class BatchReport:
    """Outcome of a batch run."""
    total: int = 0
    succeeded: int = 0
    failures: List[BatchFailure] = field(default_factory=list)

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures

    def add_failure(self, key: object, error: Exception) -> None:
        self.failures.append(
            BatchFailure(key=str(key), category=classify_error(error), message=str(error))
        )

    def summary(self) -> str:
        if self.ok:
            return f"Processed {self.succeeded} of {self.total} item(s)"
        return (
            f"Processed {self.succeeded} of {self.total} item(s), "
            f"could not process {self.failed_count} item(s)"
        )


def run_batch(
    items: Iterable[Tuple[K, V]],
    action: Callable[[K, V], R],
) -> Tuple[Dict[K, R], BatchReport]:
    """
    Run an action for every (key, value) pair, collecting failures.

    Only MintPrepError and OSError are collected; anything else is a bug and
    propagates.

    Args:
        items: (key, value) pairs, processed in order
        action: Callable invoked as action(key, value)

    Returns:
        Tuple of (results keyed by key, BatchReport)
    """
    results: Dict[K, R] = {}
    report = BatchReport()

    for key, value in items:
        report.total += 1
        try:
            results[key] = action(key, value)
        except (MintPrepError, OSError) as e:
            logger.error(f"Batch item failed: {{'key': {str(key)!r}, 'error': {str(e)!r}}}")
            report.add_failure(key, e)
        else:
            report.succeeded += 1

    if report.ok:
        logger.info(report.summary())
    else:
        logger.warning(report.summary())

    return results, report
