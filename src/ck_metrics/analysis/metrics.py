"""Per-class metric records for Chidamber-Kemerer analysis."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from ..core.exceptions import DuplicateClassError, UnvisitedRecordError

WMC_DECIMALS = 6


class RecordState(str, Enum):
    """Lifecycle state of a metrics record.

    UNVISITED records exist only because another class referenced them;
    they hold afferent couplings and a child count but no measurements.
    """

    UNVISITED = "unvisited"
    ANALYZED = "analyzed"


def compute_wmc(samples: Sequence[float], min_loc: float, max_loc: float) -> float:
    """Weight each method's lines of code and sum the weights.

    A sample equal to ``min_loc`` weighs 1, one equal to ``max_loc`` weighs
    2, and anything between is interpolated linearly into (1, 2). When the
    range is empty (``max_loc <= min_loc``) samples that match neither bound
    weigh 1.

    Args:
        samples: Lines of code per measured method
        min_loc: Lower bound of the weighting range
        max_loc: Upper bound of the weighting range

    Returns:
        Weighted methods per class

    Examples:
        >>> compute_wmc([3, 5, 7], 3, 7)
        4.5
    """
    span = max_loc - min_loc
    wmc = 0.0
    for loc in samples:
        if loc == min_loc:
            wmc += 1
        elif loc == max_loc:
            wmc += 2
        elif span <= 0:
            wmc += 1
        else:
            wmc += (loc - min_loc) / span + 1
    return wmc


@dataclass(frozen=True)
class ClassMeasurements:
    """Metrics a class computes about itself, written once when it is analyzed.

    Attributes:
        wmc_samples: Lines of code of each measured method, in declaration order
        min_loc: Lower bound of the WMC weighting range
        max_loc: Upper bound of the WMC weighting range
        dit: Depth of inheritance tree
        cbo: Coupling between object classes
        dicbo: Coupling to dependency-injection framework classes
        srfc: Response set size, same package
        drfc: Response set size, different packages
        lcom: Lack of cohesion in methods
        npm: Number of public methods
        is_public: Class carries the public modifier
    """

    wmc_samples: tuple[float, ...] = ()
    min_loc: float = 1
    max_loc: float = 0
    dit: int = 0
    cbo: int = 0
    dicbo: int = 0
    srfc: int = 0
    drfc: int = 0
    lcom: int = 0
    npm: int = 0
    is_public: bool = False

    @property
    def wmc(self) -> float:
        return compute_wmc(self.wmc_samples, self.min_loc, self.max_loc)

    @property
    def rfc(self) -> int:
        return self.srfc + self.drfc


class ClassMetricsSummary(NamedTuple):
    """Reported metrics for one analyzed class, in output order."""

    wmc: float
    dit: int
    noc: int
    cbo: int
    dicbo: int
    rfc: int
    lcom: int
    ca: int
    npm: int
    srfc: int
    drfc: int

    def to_text(self) -> str:
        """Space-separated values in output order.

        WMC is rounded to ``WMC_DECIMALS`` places and never switches to
        exponent notation for realistic class sizes.
        """
        return " ".join(
            str(round(value, WMC_DECIMALS)) if isinstance(value, float) else str(value)
            for value in self
        )


@dataclass
class MetricsRecord:
    """Metrics for one class, keyed by its fully-qualified name.

    Records are created on first reference. Other classes' analyses may add
    afferent couplings and children at any time; the class's own
    measurements are attached exactly once.

    Mutating methods are not synchronized; ``ClassRegistry`` calls them
    under the record's lock.
    """

    name: str
    state: RecordState = RecordState.UNVISITED
    noc: int = 0
    _afferent: set[str] = field(default_factory=set, init=False, repr=False)
    _measurements: ClassMeasurements | None = field(
        default=None, init=False, repr=False
    )

    @property
    def is_analyzed(self) -> bool:
        return self.state is RecordState.ANALYZED

    @property
    def afferent_coupled(self) -> frozenset[str]:
        """Names of classes that depend on this one."""
        return frozenset(self._afferent)

    @property
    def ca(self) -> int:
        return len(self._afferent)

    @property
    def measurements(self) -> ClassMeasurements:
        """The class's own measurements.

        Raises:
            UnvisitedRecordError: The class was referenced but never analyzed
        """
        if self._measurements is None:
            raise UnvisitedRecordError(
                f"Class {self.name} was referenced but never analyzed",
                context={"class_name": self.name},
            )
        return self._measurements

    @property
    def wmc(self) -> float:
        return self.measurements.wmc

    def add_afferent_coupling(self, class_name: str) -> None:
        """Record that ``class_name`` depends on this class."""
        if class_name != self.name:
            self._afferent.add(class_name)

    def increment_children(self) -> None:
        self.noc += 1

    def mark_analyzed(self, measurements: ClassMeasurements) -> None:
        """Attach measurements and transition to ANALYZED.

        Raises:
            DuplicateClassError: The record was already analyzed
        """
        if self.state is RecordState.ANALYZED:
            raise DuplicateClassError(
                f"Class {self.name} was already analyzed in this run",
                context={"class_name": self.name},
            )
        self._measurements = measurements
        self.state = RecordState.ANALYZED

    def summary(self) -> ClassMetricsSummary:
        """Return the reported metrics in output order.

        Raises:
            UnvisitedRecordError: The class was referenced but never analyzed
        """
        m = self.measurements
        return ClassMetricsSummary(
            wmc=m.wmc,
            dit=m.dit,
            noc=self.noc,
            cbo=m.cbo,
            dicbo=m.dicbo,
            rfc=m.rfc,
            lcom=m.lcom,
            ca=self.ca,
            npm=m.npm,
            srfc=m.srfc,
            drfc=m.drfc,
        )

    def to_dict(self) -> dict[str, Any]:
        """Flatten an analyzed record for JSON output."""
        data: dict[str, Any] = {"class_name": self.name}
        data.update(self.summary()._asdict())
        data["is_public"] = self.measurements.is_public
        return data
