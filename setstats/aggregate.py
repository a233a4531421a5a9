"""Accumulation of song occurrences into ranked statistics."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt


class SongStatistic(BaseModel):
    """One ranked row of the frequency table."""

    model_config = ConfigDict(frozen=True)

    rank: PositiveInt
    name: str
    count: PositiveInt
    percentage: float = Field(ge=0)  # count / total_documents * 100, one decimal


class StatisticsReport(BaseModel):
    """Totals plus the ranked song list for one run."""

    model_config = ConfigDict(frozen=True)

    total_documents: NonNegativeInt
    total_unique_names: NonNegativeInt
    total_occurrences: NonNegativeInt
    ranked_results: tuple[SongStatistic, ...] = ()


def percentage(count: int, total_documents: int) -> float:
    """Share of documents as a percentage, 0 when there are no documents."""
    if total_documents == 0:
        return 0.0
    return round(count / total_documents * 100, 1)


class AggregatorState:
    """
    Occurrence counts keyed by normalized name.

    Keys keep the order in which names were first seen, which is also the
    tie-break order for equal counts. States built over disjoint slices of a
    run can be merged; merging in document order gives the same result as a
    single sequential pass.
    """

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.counts)

    def add(self, name: str) -> None:
        """Count one occurrence. Blank names are ignored."""
        if not name or not name.strip():
            return
        self.counts[name] = self.counts.get(name, 0) + 1

    def update(self, names: Iterable[str]) -> "AggregatorState":
        for name in names:
            self.add(name)
        return self

    def merge(self, other: "AggregatorState") -> "AggregatorState":
        """Fold another state's counts into this one and return self."""
        for name, count in other.counts.items():
            self.counts[name] = self.counts.get(name, 0) + count
        return self

    def report(self, total_documents: int) -> StatisticsReport:
        """
        Rank the accumulated names.

        Args:
            total_documents: Number of documents submitted to the run; the
                denominator for percentages.

        Returns:
            A StatisticsReport sorted by count descending, equal counts in
            first-seen order.

        Raises:
            ValueError: If total_documents is negative.
        """
        if total_documents < 0:
            raise ValueError(f"total_documents must be >= 0, got {total_documents}")

        # sorted() is stable, so ties keep dict insertion (first-seen) order
        ordered = sorted(self.counts.items(), key=lambda item: item[1], reverse=True)
        ranked = tuple(
            SongStatistic(
                rank=position,
                name=name,
                count=count,
                percentage=percentage(count, total_documents),
            )
            for position, (name, count) in enumerate(ordered, start=1)
        )
        return StatisticsReport(
            total_documents=total_documents,
            total_unique_names=len(self.counts),
            total_occurrences=sum(self.counts.values()),
            ranked_results=ranked,
        )


def aggregate(names: Iterable[str], total_documents: int) -> StatisticsReport:
    """
    Count normalized names across all documents and rank them.

    Args:
        names: Normalized names, one element per occurrence.
        total_documents: Number of documents submitted to the run.

    Returns:
        The ranked StatisticsReport.
    """
    return AggregatorState().update(names).report(total_documents)
