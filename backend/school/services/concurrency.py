# school/services/concurrency.py
import logging
import threading
import time
from typing import Callable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

class GroupRunner:
    """
    Splits the head of a sequence into fixed-size groups by position.
    Group 0 runs on the calling thread, every other group on its own worker.
    Items inside one group are always handled in sequence order.
    """
    
    def __init__(
        self,
        group_size: int = 2,
        group_count: int = 3,
        join_timeout: Optional[float] = None,
        thread_name_prefix: str = "group-runner"
    ):
        if group_size < 1 or group_count < 1:
            raise ValueError("group_size and group_count must be positive")
        self.group_size = group_size
        self.group_count = group_count
        self.join_timeout = join_timeout
        self.thread_name_prefix = thread_name_prefix
    
    @property
    def required(self) -> int:
        return self.group_size * self.group_count
    
    def partition(self, items: Sequence[T]) -> List[List[T]]:
        head = list(items[:self.required])
        return [
            head[start:start + self.group_size]
            for start in range(0, self.required, self.group_size)
        ]
    
    def _handle_group(self, group: List[T], handle: Callable[[T], None]) -> None:
        try:
            for item in group:
                handle(item)
        except Exception:
            # Worker failures stay inside the worker
            logger.exception("Group worker failed")
    
    def spawn(self, groups: List[List[T]], handle: Callable[[T], None]) -> List[threading.Thread]:
        """Start one fresh worker per group"""
        workers = [
            threading.Thread(
                target=self._handle_group,
                args=(group, handle),
                name=f"{self.thread_name_prefix}-{index}"
            )
            for index, group in enumerate(groups, start=1)
        ]
        for worker in workers:
            worker.start()
        return workers
    
    def join(self, workers: List[threading.Thread]) -> bool:
        """
        Wait for every worker, bounded by join_timeout across all of them
        Returns: True when all workers finished
        """
        deadline = None if self.join_timeout is None else time.monotonic() + self.join_timeout
        for worker in workers:
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0.0)
            worker.join(remaining)
        
        still_running = [worker.name for worker in workers if worker.is_alive()]
        if still_running:
            logger.error(
                f"Workers {still_running} still running after {self.join_timeout}s, giving up the wait"
            )
            return False
        
        logger.info("All parallel workers have completed their execution")
        return True
    
    def run(self, items: Sequence[T], handle: Callable[[T], None], wait_for_workers: bool = True) -> bool:
        """
        Returns: False when there are not enough items (nothing handled),
        True once every group has been dispatched
        """
        if len(items) < self.required:
            logger.warning(
                f"Not enough items to perform the task. At least {self.required} required, got {len(items)}."
            )
            return False
        
        first, *rest = self.partition(items)
        for item in first:
            handle(item)
        
        workers = self.spawn(rest, handle)
        if wait_for_workers:
            self.join(workers)
        
        return True
