"""
Metrics summary model - the JSON document served at /v1/metrics
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import MetricsError


@dataclass
class GaugeValue:
    name: str
    value: float
    labels: Dict[str, str] = field(default_factory=dict)


@dataclass
class PointValue:
    name: str
    points: List[float] = field(default_factory=list)


@dataclass
class SampledValue:
    """Aggregated counter or timer sample"""
    name: str
    count: int = 0
    rate: float = 0.0
    sum: float = 0.0
    min: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    stddev: float = 0.0
    labels: Dict[str, str] = field(default_factory=dict)


@dataclass
class MetricsSummary:
    timestamp: str = ""
    gauges: List[GaugeValue] = field(default_factory=list)
    points: List[PointValue] = field(default_factory=list)
    counters: List[SampledValue] = field(default_factory=list)
    samples: List[SampledValue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MetricsSummary':
        """
        Build from decoded JSON.

        Raises:
            MetricsError: document does not have the expected shape
        """
        if not isinstance(data, dict):
            raise MetricsError(f"unexpected metrics document: {type(data).__name__}")
        try:
            return cls(
                timestamp=data.get("Timestamp") or "",
                gauges=[
                    GaugeValue(g["Name"], float(g["Value"]), dict(g.get("Labels") or {}))
                    for g in data.get("Gauges") or []
                ],
                points=[
                    PointValue(p["Name"], [float(v) for v in p.get("Points") or []])
                    for p in data.get("Points") or []
                ],
                counters=[_sampled(c) for c in data.get("Counters") or []],
                samples=[_sampled(s) for s in data.get("Samples") or []],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MetricsError(f"malformed metrics document: {e!r}") from e

    def gauge_total(self, name: str) -> Optional[float]:
        """Sum of all gauges called name (across label sets); None if absent"""
        values = [g.value for g in self.gauges if g.name == name]
        if not values:
            return None
        return sum(values)


def _sampled(item: Dict[str, Any]) -> SampledValue:
    return SampledValue(
        name=item["Name"],
        count=int(item.get("Count", 0)),
        rate=float(item.get("Rate", 0.0)),
        sum=float(item.get("Sum", 0.0)),
        min=float(item.get("Min", 0.0)),
        max=float(item.get("Max", 0.0)),
        mean=float(item.get("Mean", 0.0)),
        stddev=float(item.get("Stddev", 0.0)),
        labels=dict(item.get("Labels") or {}),
    )
