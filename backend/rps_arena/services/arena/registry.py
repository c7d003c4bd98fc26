from typing import Dict, List, Optional

from rps_arena.models import Identity, generate_display_name


class IdentityRegistry:
    """Live connections and their display names and counters.

    Insertion order is kept, which the leaderboard relies on to break ties.
    """

    def __init__(self, name_factory=generate_display_name, win_reward: int = 10):
        self._identities: Dict[str, Identity] = {}
        self._name_factory = name_factory
        self.win_reward = win_reward

    def connect(self, handle: str) -> Identity:
        existing = self._identities.get(handle)
        if existing:
            return existing
        identity = Identity(handle=handle, username=self._name_factory())
        self._identities[handle] = identity
        return identity

    def disconnect(self, handle: str) -> Optional[Identity]:
        return self._identities.pop(handle, None)

    def get(self, handle: str) -> Optional[Identity]:
        return self._identities.get(handle)

    def is_live(self, handle: str) -> bool:
        return handle in self._identities

    def record_win(self, handle: str) -> None:
        # The winner may have disconnected in the meantime
        identity = self._identities.get(handle)
        if not identity:
            return
        identity.score += self.win_reward
        identity.wins += 1

    def identities(self) -> List[Identity]:
        return list(self._identities.values())

    def __len__(self) -> int:
        return len(self._identities)
