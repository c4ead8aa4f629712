"""Simulations of memory allocation, the banker's algorithm, C-SCAN, LRU paging, CPU scheduling and a bounded buffer."""

__version__ = "0.1.0"
__all__ = ["allocation", "bankers", "disk", "lru", "scheduling", "semaphore"]