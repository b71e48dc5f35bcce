import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np

from action_space.action_def import HeadingAction
from action_space.base import ActionSpace
from action_space.command import ActionCommand, CommandChannel
from action_space.utils import angle_normalization, linspace
from env.object_state import pose_of

logger = logging.getLogger(__name__)


class GenericActionSpace(ActionSpace):
    """
    Actions relative to the robot's own pose: every combination of speed,
    duration and heading.

    Headings split 2pi into `num_heading` equal parts, e.g. 4 headings give
    0, 90, 180, 270 degrees. Ids are row-major over (speed, duration, heading):

        id = j * num_duration * num_heading + k * num_heading + l
    """

    Action = HeadingAction

    def __init__(self, speeds: Sequence[float], durations: Sequence[float], num_heading: int):
        """
        Args:
            speeds: available speeds (m/s).
            durations: available durations (s).
            num_heading (int): number of headings, a power of 2 and >= 4.
        """
        if len(speeds) == 0 or len(durations) == 0:
            raise ValueError("speeds and durations must not be empty")
        if isinstance(num_heading, bool) or not isinstance(num_heading, (int, np.integer)):
            raise ValueError(f"num_heading must be an int, got {num_heading!r}")
        num_heading = int(num_heading)
        if num_heading < 4 or num_heading & (num_heading - 1) != 0:
            raise ValueError(f"num_heading must be a power of 2 and >= 4, got {num_heading}")

        self.speeds = tuple(float(s) for s in speeds)
        self.durations = tuple(float(d) for d in durations)
        self.num_heading = num_heading
        self.headings = tuple(linspace(0.0, 2 * math.pi - 2 * math.pi / num_heading, num_heading))

        actions = []
        for speed in self.speeds:
            for duration in self.durations:
                for heading in self.headings:
                    actions.append(HeadingAction(speed, duration, heading))
        super().__init__(actions)
        logger.debug(
            "generic action space: %d speeds x %d durations x %d headings = %d actions",
            len(self.speeds), len(self.durations), self.num_heading, self.size,
        )

    @property
    def num_speed(self) -> int:
        return len(self.speeds)

    @property
    def num_duration(self) -> int:
        return len(self.durations)

    def action_id(self, speed_index: int, duration_index: int, heading_index: int) -> int:
        for name, idx, bound in (
            ('speed', speed_index, self.num_speed),
            ('duration', duration_index, self.num_duration),
            ('heading', heading_index, self.num_heading),
        ):
            if not 0 <= idx < bound:
                raise IndexError(f"{name} index {idx} out of range [0, {bound})")
        return (speed_index * self.num_duration * self.num_heading
                + duration_index * self.num_heading
                + heading_index)

    def action_indices(self, action_id) -> Optional[Tuple[int, int, int]]:
        """Inverse of action_id(): (speed_index, duration_index, heading_index)."""
        if not self.is_valid_action_id(action_id):
            return None
        action_id = int(action_id)
        heading_index = action_id % self.num_heading
        duration_index = (action_id // self.num_heading) % self.num_duration
        speed_index = action_id // (self.num_duration * self.num_heading)
        return (speed_index, duration_index, heading_index)

    def _feature_vector(self, action: HeadingAction) -> np.ndarray:
        # heading compared on the unit circle so 0 and 2pi - eps stay close
        return np.concatenate(([action.speed, action.duration], action.direction))

    def publish_action(self, action_id, channel: CommandChannel, state=None) -> bool:
        """
        Publish the action as a command starting from the robot's pose.

        Args:
            state: robot pose provider, (x, y, theta) or get_pos(); origin if None.
        """
        action = self.get_action(action_id)
        if action is None:
            return False
        x, y, theta = pose_of(state) if state is not None else (0.0, 0.0, 0.0)
        channel.publish(ActionCommand(
            speed=action.speed,
            duration=action.duration,
            x=x,
            y=y,
            theta=angle_normalization(theta + action.heading),
        ))
        return True
