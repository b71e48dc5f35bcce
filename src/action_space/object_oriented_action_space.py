import logging
import math
from typing import Optional, Sequence

import numpy as np

from configs import CENTER_OFFSET, OBJECT_ACTION_DURATION
from action_space.action_def import SIDES, FRONT, BACK, GenericAction, ObjectOrientedAction
from action_space.base import ActionSpace
from action_space.command import ActionCommand, CommandChannel
from action_space.utils import angle_normalization, linspace
from env.object_state import pose_of

logger = logging.getLogger(__name__)


class ObjectOrientedActionSpace(ActionSpace):
    """
    Actions defined relative to an object's four edges.

    For each side (FRONT, LEFT, BACK, RIGHT), each offset along that edge and
    each speed there is one GenericAction, in that nesting order. A generic
    action only becomes a world frame action once the object's live pose is
    known, see get_generic_to_object_oriented_action().
    """

    def __init__(
        self,
        speeds: Sequence[float],
        ratios: Sequence[float],
        edge_offset: float,
        num_offset: int,
        center_offset: float = CENTER_OFFSET,
    ):
        """
        Args:
            speeds: available speeds (mm/s).
            ratios: object extent [along FRONT/BACK, along LEFT/RIGHT].
            edge_offset: max offset from the center of an edge (mm).
            num_offset (int): offsets sampled in [-edge_offset, edge_offset].
            center_offset: distance from the object center to the start pose (mm).
        """
        if len(speeds) == 0:
            raise ValueError("speeds must not be empty")
        if len(ratios) != 2:
            raise ValueError(f"expected 2 ratios (front/back, left/right), got {len(ratios)}")
        if not math.isfinite(edge_offset) or edge_offset <= 0:
            raise ValueError(f"edge_offset must be positive and finite, got {edge_offset}")
        if isinstance(num_offset, bool) or not isinstance(num_offset, (int, np.integer)) or num_offset < 1:
            raise ValueError(f"num_offset must be a positive int, got {num_offset!r}")

        self.speeds = tuple(float(s) for s in speeds)
        self.ratios = tuple(float(r) for r in ratios)
        self.edge_offset = float(edge_offset)
        self.num_offset = int(num_offset)
        self.center_offset = float(center_offset)
        self.cube_offsets = tuple(
            [0.0] if self.num_offset == 1
            else linspace(-self.edge_offset, self.edge_offset, self.num_offset)
        )

        actions = []
        for heading_offset in SIDES:
            ratio = self.ratios[0] if heading_offset in (FRONT, BACK) else self.ratios[1]
            for cube_offset in self.cube_offsets:
                for speed in self.speeds:
                    # a positive cube offset maps to a negative edge ratio
                    actions.append(GenericAction(
                        speed,
                        -cube_offset / self.edge_offset,
                        ratio,
                        heading_offset))
        super().__init__(actions)
        logger.debug(
            "object oriented action space: 4 sides x %d offsets x %d speeds = %d actions",
            self.num_offset, len(self.speeds), self.size,
        )

    @property
    def actions_per_side(self) -> int:
        return self.num_offset * len(self.speeds)

    def action_ids_for_side(self, side: float) -> range:
        """Contiguous id range holding every action of one side."""
        if side not in SIDES:
            raise ValueError(f"unknown side {side!r}, expected one of {SIDES}")
        start = SIDES.index(side) * self.actions_per_side
        return range(start, start + self.actions_per_side)

    def _feature_vector(self, action: GenericAction) -> np.ndarray:
        return np.array([action.speed, action.edge_offset_ratio, action.aspect_ratio])

    def get_generic_to_object_oriented_action(self, action_id, state) -> Optional[ObjectOrientedAction]:
        """
        Place a generic action around the object.

        Args:
            action_id (int): id of the generic action.
            state: object pose provider, (x, y, theta) or anything with get_pos().

        Returns:
            ObjectOrientedAction with the world frame start pose, or None if
            the id is invalid.
        """
        action = self.get_action(action_id)
        if action is None:
            return None

        px, py, angle = pose_of(state)
        heading = action.heading_offset
        lateral = action.edge_offset_ratio * self.edge_offset
        start_pose = (
            px - self.center_offset * math.cos(heading) + lateral * math.sin(heading),
            py - self.center_offset * math.sin(heading) + lateral * math.cos(heading),
            angle_normalization(angle + heading),
        )
        return ObjectOrientedAction(action.speed, start_pose)

    def publish_action(
        self,
        action_id,
        channel: CommandChannel,
        state,
        duration: float = OBJECT_ACTION_DURATION,
    ) -> bool:
        oo_action = self.get_generic_to_object_oriented_action(action_id, state)
        if oo_action is None:
            return False
        x, y, theta = oo_action.start_pose
        channel.publish(ActionCommand(
            speed=oo_action.speed,
            duration=float(duration),
            x=x,
            y=y,
            theta=theta,
        ))
        return True
