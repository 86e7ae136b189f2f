"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from typing import Optional

import psutil

# Configure logging
logger = logging.getLogger(__name__)

# Constants
EPSILON = 1e-10  # Floating point comparison tolerance
MAX_QUEUE_SIZE = 100000  # Maximum number of live frontier entries
DEFAULT_MAX_MEMORY_MB: Optional[float] = None  # Memory ceiling disabled


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Compare costs with floating point tolerance.

    Returns True only if new_cost is lower than old_cost by more than EPSILON,
    so equal costs never count as an improvement.
    Example: new=2.0, old=3.0 returns True; new=3.0, old=3.0 returns False
    """
    return (new_cost - old_cost) < -EPSILON


class MemoryManager:
    """Memory ceiling for a single search."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager. Without a limit no measurements are taken."""
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ValueError("max_memory_mb must be positive")
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb is not None else None
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.warning(
                    f"Search memory {current/1024/1024:.1f}MB over limit "
                    f"{self.max_memory/1024/1024:.1f}MB"
                )
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory_bytes(self) -> Optional[int]:
        """Peak memory seen during the search, or None when unlimited."""
        if not self.max_memory:
            return None
        return int(self._peak_memory)


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
