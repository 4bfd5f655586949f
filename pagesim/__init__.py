"""pagesim - offline hit counting for page replacement policies."""

from .cache_base import Cache  # noqa: F401
from .caches import CLOCKCache, FIFOCache, LRUCache, OPTCache, RANDCache  # noqa: F401
from .metrics import MetricsCollector  # noqa: F401
from .policies import (  # noqa: F401
    POLICIES,
    clock_hits,
    count_hits,
    fifo_hits,
    hit_count,
    lru_hits,
    opt_hits,
    rand_hits,
)
from .simulator import Simulator  # noqa: F401
from .trace_generator import TraceGenerator, WorkloadType  # noqa: F401
