from collections import deque
from typing import Callable, Optional, Tuple


class MatchmakingQueue:
    """FIFO waitlist of handles looking for an opponent."""

    def __init__(self):
        self._waiting = deque()

    def enqueue(self, handle: str) -> bool:
        if handle in self._waiting:
            return False
        self._waiting.append(handle)
        return True

    def cancel(self, handle: str) -> bool:
        try:
            self._waiting.remove(handle)
        except ValueError:
            return False
        return True

    def try_pair(self, is_live: Optional[Callable[[str], bool]] = None) -> Optional[Tuple[str, str]]:
        """Pop the two oldest waiters.

        If either of them is no longer live, the survivors go back to the
        front of the queue in their original order and nothing is paired;
        the next enqueue or disconnect retries.
        """
        if len(self._waiting) < 2:
            return None
        first = self._waiting.popleft()
        second = self._waiting.popleft()
        if is_live is not None and not (is_live(first) and is_live(second)):
            for handle in (second, first):
                if is_live(handle):
                    self._waiting.appendleft(handle)
            return None
        return first, second

    def waiting(self):
        return list(self._waiting)

    def __contains__(self, handle) -> bool:
        return handle in self._waiting

    def __len__(self) -> int:
        return len(self._waiting)
