import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
from gymnasium import spaces

from action_space.action_def import Action
from action_space.command import CommandChannel
from action_space.utils import euclidean_distance

logger = logging.getLogger(__name__)


class ActionSpace(ABC):
    """
    Finite, immutable table of motion primitives indexed by dense ids.

    The table is built once by the subclass constructor and never changes
    afterwards, so every read below is safe without locking. Lookups never
    raise on a bad id: they report failure with None / False instead.
    """

    def __init__(self, actions: Iterable[Action]):
        self._actions: Tuple[Action, ...] = tuple(actions)
        if not self._actions:
            raise ValueError(f"{type(self).__name__} would be empty")

    @property
    def size(self) -> int:
        return len(self._actions)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    @property
    def gym_space(self) -> spaces.Discrete:
        """Discrete view of the ids, for samplers that speak gymnasium."""
        return spaces.Discrete(self.size)

    def is_valid_action_id(self, action_id) -> bool:
        # bool is an int subclass but never a meaningful id
        if isinstance(action_id, bool) or not isinstance(action_id, (int, np.integer)):
            return False
        return 0 <= action_id < self.size

    def get_action(self, action_id) -> Optional[Action]:
        if not self.is_valid_action_id(action_id):
            logger.debug("invalid action id %r (size %d)", action_id, self.size)
            return None
        return self._actions[int(action_id)]

    def get_action_space(self) -> Tuple[Action, ...]:
        return self._actions

    def features(self, action_id) -> Optional[np.ndarray]:
        action = self.get_action(action_id)
        if action is None:
            return None
        return self._feature_vector(action)

    def feature_matrix(self) -> np.ndarray:
        """Feature vectors of all actions, shape [size, D], in id order."""
        return np.stack([self._feature_vector(a) for a in self._actions])

    def action_similarity(self, action_id1, action_id2) -> Optional[float]:
        """
        Euclidean distance between the feature vectors of two actions,
        or None if either id is invalid. Zero means identical.
        """
        if not (self.is_valid_action_id(action_id1) and self.is_valid_action_id(action_id2)):
            logger.debug("similarity requested for invalid ids %r, %r", action_id1, action_id2)
            return None
        return euclidean_distance(
            self._feature_vector(self._actions[int(action_id1)]),
            self._feature_vector(self._actions[int(action_id2)]),
        )

    @abstractmethod
    def _feature_vector(self, action: Action) -> np.ndarray:
        """Per-variant feature space used by action_similarity."""

    @abstractmethod
    def publish_action(self, action_id, channel: CommandChannel, *args, **kwargs) -> bool:
        """Send the command for `action_id` over `channel`; False if the id is invalid."""
