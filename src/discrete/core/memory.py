"""
Memory guard for long-running graph computations.
"""

import gc
import logging
import os
import time
from typing import Optional

import psutil  # type: ignore # Missing stubs

logger = logging.getLogger(__name__)


class MemoryManager:
    """Tracks resident memory growth of a computation against an optional limit."""

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = 0.1):
        """
        Initialize memory manager.

        Args:
            max_memory_mb: Allowed growth over the starting RSS, in MB; ``None``
                disables the limit
            check_interval: Minimum seconds between two RSS samples
        """
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        if self.max_memory:
            gc.collect()
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = 0.0
        self._check_interval = check_interval

    def check_memory(self) -> None:
        """
        Check if memory usage exceeds limit.

        Raises:
            MemoryError: If growth stays above the limit after a collection
        """
        if not self.max_memory:
            return

        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.warning(
                    "Memory limit exceeded: %.1fMB over a %.1fMB budget",
                    (current - self.start_memory) / 1024 / 1024,
                    self.max_memory / 1024 / 1024,
                )
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return int(process.memory_info().rss)
