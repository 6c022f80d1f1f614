"""View state for the AUROC difference panel.

The load runs as one coroutine that returns an immutable
`ComparisonResult`; `ComparisonView.commit()` is the only place the view
state changes, so a result is either fully visible or not at all.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from config.models import DashboardConfig
from config.schemas import AggregateStats, Dataset, ParseIssue
from comparison.aggregator import compute_stats
from comparison.loader import LoadError, load_text
from comparison.parser import parse_csv
from comparison.transformer import transform_rows
from utils.io import FileReader, LocalFileReader
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of one load: the dataset and its stats, or the load error."""
    dataset: Dataset = ()
    stats: AggregateStats = field(default_factory=lambda: compute_stats(()))
    issues: Tuple[ParseIssue, ...] = ()
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "ComparisonResult":
        return cls(error=error)


@dataclass(frozen=True)
class ViewState:
    loading: bool
    result: ComparisonResult

    @classmethod
    def initial(cls) -> "ViewState":
        return cls(loading=True, result=ComparisonResult())

    @property
    def dataset(self) -> Dataset:
        return self.result.dataset

    @property
    def stats(self) -> AggregateStats:
        return self.result.stats

    @property
    def has_data(self) -> bool:
        return not self.loading and len(self.result.dataset) > 0


def build_result(text: str, mismatch_tolerance: float) -> ComparisonResult:
    """Parse, transform and aggregate already-loaded text."""
    parsed = parse_csv(text)
    dataset = transform_rows(parsed.rows)
    stats = compute_stats(dataset, mismatch_tolerance)
    return ComparisonResult(dataset=dataset, stats=stats, issues=parsed.issues)


async def load_comparison(reader: FileReader, config: DashboardConfig) -> ComparisonResult:
    """
    Load the configured file and build its comparison result.

    A failed read is returned as a result with ``error`` set; it never
    raises :class:`LoadError` to the caller.
    """
    try:
        text = await load_text(reader, config.file_name)
    except LoadError as e:
        logger.error(f"Error loading data: {e}", exc_info=True)
        return ComparisonResult.failed(str(e))

    return build_result(text, config.mismatch_tolerance)


Listener = Callable[[ViewState], None]


class ComparisonView:
    """Holds the panel state across one activation."""

    def __init__(
        self,
        config: Optional[DashboardConfig] = None,
        reader: Optional[FileReader] = None,
    ):
        self.config = config or DashboardConfig.from_defaults()
        self.reader = reader or LocalFileReader(self.config.data_dir, self.config.encoding)
        self.state = ViewState.initial()
        self._activated = False
        self._torn_down = False
        self._listeners: List[Listener] = []

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with the new state after every commit."""
        self._listeners.append(listener)

    def commit(self, result: ComparisonResult) -> bool:
        """
        Replace the state with a loaded result.

        Returns:
            False when the view was already torn down and the result was dropped
        """
        if self._torn_down:
            logger.info("View torn down before load finished; dropping result")
            return False

        self.state = ViewState(loading=False, result=result)
        logger.debug(
            f"Committed {len(result.dataset)} rows "
            f"(issues={len(result.issues)}, error={result.error})"
        )
        for listener in self._listeners:
            listener(self.state)
        return True

    async def activate(self) -> ViewState:
        """Run the load exactly once; later calls return the current state."""
        if self._activated:
            return self.state
        self._activated = True

        try:
            result = await load_comparison(self.reader, self.config)
        except Exception as e:
            # Loading must always clear, even when the reader breaks its contract
            logger.exception("Unexpected error loading comparison data")
            result = ComparisonResult.failed(f"Unexpected error loading data: {e}")
        self.commit(result)
        return self.state

    def teardown(self) -> None:
        self._torn_down = True
        self._listeners.clear()
