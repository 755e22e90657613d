"""
Line aggregator for gitqs.

Folds a stream of records into keyed buckets. The reserved total bucket
is updated in the same step as the record's own bucket, so
total.count == sum(bucket.count) holds after every record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Optional

TOTAL_KEY = "total"

KeyFn = Callable[[Any], Optional[str]]
ValueFn = Callable[[Any], float]
TimeFn = Callable[[Any], Optional[datetime]]


def percentage(part: float, whole: float) -> float:
    """part / whole * 100, or 0 when whole is 0."""
    if not whole:
        return 0.0
    return part / whole * 100


@dataclass
class Bucket:
    """Accumulator for one category value."""
    key: str
    count: int = 0
    sums: Dict[str, float] = field(default_factory=dict)
    first_at: Optional[datetime] = None
    last_at: Optional[datetime] = None

    def add(self, values: Dict[str, float], when: Optional[datetime] = None) -> None:
        """Fold one record's values into this bucket."""
        self.count += 1
        for name, value in values.items():
            self.sums[name] = self.sums.get(name, 0) + value

        if when is not None:
            if self.first_at is None or when < self.first_at:
                self.first_at = when
            if self.last_at is None or when > self.last_at:
                self.last_at = when

    def metric(self, name: str) -> float:
        """Value of a metric; 'count' is the record count."""
        if name == "count":
            return self.count
        return self.sums.get(name, 0)


@dataclass
class AggregateResult:
    """Buckets keyed by category plus the running total."""
    buckets: Dict[str, Bucket] = field(default_factory=dict)
    total: Bucket = field(default_factory=lambda: Bucket(TOTAL_KEY))

    def fold(self, key: str, values: Dict[str, float], when: Optional[datetime] = None) -> None:
        bucket = self.buckets.get(key)
        if bucket is None:
            bucket = self.buckets[key] = Bucket(key)
        bucket.add(values, when)
        self.total.add(values, when)

    def seed(self, key: str, metric_names: Iterable[str] = ()) -> None:
        """Create an empty bucket so it renders even with no records."""
        if key not in self.buckets:
            self.buckets[key] = Bucket(key, sums={name: 0 for name in metric_names})

    def percentage(self, key: str, metric: str = "count") -> float:
        """Share of the total for one bucket's metric."""
        bucket = self.buckets.get(key)
        if bucket is None:
            return 0.0
        return percentage(bucket.metric(metric), self.total.metric(metric))

    def __len__(self) -> int:
        return len(self.buckets)


def aggregate(
    records: Iterable[Any],
    key_fn: KeyFn,
    value_fns: Optional[Dict[str, ValueFn]] = None,
    time_fn: Optional[TimeFn] = None,
    seed_keys: Iterable[str] = ()
) -> AggregateResult:
    """
    Tally records into buckets.

    Args:
        records: Lazy, finite sequence of parsed records
        key_fn: Bucket key for a record; None skips the record
        value_fns: Metric name -> numeric value to sum per record
        time_fn: Timestamp used to track first/last per bucket
        seed_keys: Keys that must appear even with zero records

    Returns:
        AggregateResult with per-key buckets and the total
    """
    value_fns = value_fns or {}
    result = AggregateResult()
    result.total.sums = {name: 0 for name in value_fns}

    for key in seed_keys:
        result.seed(key, value_fns)

    for record in records:
        key = key_fn(record)
        if key is None:
            continue

        values = {name: fn(record) for name, fn in value_fns.items()}
        when = time_fn(record) if time_fn else None
        result.fold(key, values, when)

    return result
