import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

# Canonical sides of the object, measured in the object's own frame (rad)
FRONT = 0.0
LEFT = math.pi / 2
BACK = math.pi
RIGHT = 3 * math.pi / 2
SIDES = (FRONT, LEFT, BACK, RIGHT)
SIDE_NAMES = {FRONT: 'FRONT', LEFT: 'LEFT', BACK: 'BACK', RIGHT: 'RIGHT'}

Pose = Tuple[float, float, float]  # (x, y, theta)


@dataclass(frozen=True)
class Action:
    """
    Base class of every primitive stored in an action space.
    """


@dataclass(frozen=True)
class HeadingAction(Action):
    """
    Primitive of the generic action space: drive along `heading` at `speed`
    for `duration`, relative to the robot's own frame.
    """
    speed: float     # m/s
    duration: float  # s
    heading: float   # rad, in [0, 2pi)

    @property
    def direction(self) -> np.ndarray:
        """Unit vector of the heading, shape [2]."""
        return np.array([math.cos(self.heading), math.sin(self.heading)])


@dataclass(frozen=True)
class GenericAction(Action):
    """
    Object relative primitive: approach the object from `heading_offset`
    (one of SIDES), shifted along that edge by `edge_offset_ratio`.
    """
    speed: float
    edge_offset_ratio: float  # normalized, [-1, 1]
    aspect_ratio: float       # object extent along the chosen side
    heading_offset: float     # one of SIDES

    @property
    def side_name(self) -> str:
        return SIDE_NAMES.get(self.heading_offset, f"UNKNOWN_{self.heading_offset}")


@dataclass(frozen=True)
class ObjectOrientedAction(Action):
    """
    World frame action: start at `start_pose` and drive at `speed`.
    Built on demand from a GenericAction and the object's live pose.
    """
    speed: float
    start_pose: Pose  # (x, y, theta) in world frame
