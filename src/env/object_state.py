from typing import Sequence

import numpy as np
from shapely.geometry import Point, LinearRing
from shapely.affinity import affine_transform

from action_space.action_def import Pose


class ObjectState:
    """SE2 pose of the object the robot works around."""

    def __init__(self, raw_state: Sequence[float]):
        """
        Args:
            raw_state (list): [x, y, heading]
        """
        if len(raw_state) != 3:
            raise ValueError(f"expected [x, y, heading], got {list(raw_state)}")
        self.loc: Point = Point(raw_state[:2])
        self.heading: float = float(raw_state[2])

    def create_box(self, length: float, width: float) -> LinearRing:
        """Footprint of a `length` x `width` object centered at loc, in world frame."""
        local_box = LinearRing([
            (-length/2, -width/2),
            (length/2, -width/2),
            (length/2, width/2),
            (-length/2, width/2)])
        cos_theta = np.cos(self.heading)
        sin_theta = np.sin(self.heading)
        mat = [cos_theta, -sin_theta, sin_theta, cos_theta, self.loc.x, self.loc.y]
        return affine_transform(local_box, mat)

    def get_pos(self) -> Pose:
        return (self.loc.x, self.loc.y, self.heading)

    def __repr__(self) -> str:
        return f"ObjectState(x={self.loc.x:.3f}, y={self.loc.y:.3f}, heading={self.heading:.3f})"


def pose_of(state) -> Pose:
    """
    Read (x, y, theta) from a pose provider without touching it.
    Accepts anything with get_pos() (ObjectState, vehicle states) or a plain sequence.
    """
    if hasattr(state, 'get_pos'):
        x, y, theta = state.get_pos()
    else:
        x, y, theta = state
    return (float(x), float(y), float(theta))
