from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class WorkloadType(str, Enum):
    NONLOCAL = "nonlocal"
    EIGHTY_TWENTY = "80-20"
    LOOPING = "looping"


DEFAULT_PARAMETERS: Dict[WorkloadType, Dict[str, int | float]] = {
    WorkloadType.NONLOCAL: {"total_requests": 10000, "total_pages": 100},
    WorkloadType.EIGHTY_TWENTY: {
        "total_requests": 10000,
        "total_pages": 100,
        "hot_ratio": 0.8,
        "hot_fraction": 0.2,
    },
    WorkloadType.LOOPING: {"total_requests": 10000, "loop_length": 50},
}


@dataclass
class TraceProfile:
    workload: WorkloadType
    parameters: Dict[str, int | float]


@dataclass
class TraceGenerator:
    """Builds synthetic access traces. Randomness comes from a private, seedable generator."""

    workload: WorkloadType
    parameters: Dict[str, int | float] = field(default_factory=dict)
    seed: Optional[int] = None
    profile: TraceProfile = field(init=False)
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.workload = WorkloadType(self.workload)
        merged = dict(DEFAULT_PARAMETERS[self.workload])
        unknown = sorted(set(self.parameters) - set(merged))
        if unknown:
            raise ValueError(
                f"Unknown parameter(s) for {self.workload.value}: {', '.join(unknown)}; "
                f"expected {', '.join(merged)}"
            )
        merged.update(self.parameters)
        self.parameters = merged
        self.rng = random.Random(self.seed)
        self.profile = TraceProfile(self.workload, dict(self.parameters))

    def generate(self) -> List[int]:
        if self.workload is WorkloadType.NONLOCAL:
            return self._generate_nonlocal()
        if self.workload is WorkloadType.EIGHTY_TWENTY:
            return self._generate_eighty_twenty()
        if self.workload is WorkloadType.LOOPING:
            return self._generate_looping()
        raise ValueError(f"Unknown workload type: {self.workload}")

    # --- parameter access ---------------------------------------------------------
    def _positive_int(self, name: str) -> int:
        raw = self.parameters[name]
        if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
            raise ValueError(f"{name} must be a whole number, got {raw!r}")
        value = int(raw)
        if value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value}")
        return value

    def _ratio(self, name: str) -> float:
        value = float(self.parameters[name])
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be within [0, 1], got {value}")
        return value

    # --- workload implementations -------------------------------------------------
    def _generate_nonlocal(self) -> List[int]:
        total_requests = self._positive_int("total_requests")
        total_pages = self._positive_int("total_pages")
        return [self.rng.randrange(total_pages) for _ in range(total_requests)]

    def _generate_eighty_twenty(self) -> List[int]:
        total_requests = self._positive_int("total_requests")
        total_pages = self._positive_int("total_pages")
        hot_ratio = self._ratio("hot_ratio")
        hot_fraction = self._ratio("hot_fraction")

        hot_set_size = min(total_pages, max(1, int(total_pages * hot_fraction)))
        hot_pages = list(range(hot_set_size))
        # every page is hot when the hot set spans the whole universe
        cold_pages = list(range(hot_set_size, total_pages)) or hot_pages

        trace: List[int] = []
        for _ in range(total_requests):
            if self.rng.random() < hot_ratio:
                trace.append(self.rng.choice(hot_pages))
            else:
                trace.append(self.rng.choice(cold_pages))
        return trace

    def _generate_looping(self) -> List[int]:
        total_requests = self._positive_int("total_requests")
        loop_length = self._positive_int("loop_length")
        return [index % loop_length for index in range(total_requests)]
