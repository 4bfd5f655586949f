"""Collection of concrete page replacement policies."""

from .clock import CLOCKCache  # noqa: F401
from .fifo import FIFOCache  # noqa: F401
from .lru import LRUCache  # noqa: F401
from .opt import OPTCache  # noqa: F401
from .rand import RANDCache  # noqa: F401
