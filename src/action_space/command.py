import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionCommand:
    """
    Payload handed to the robot driver: drive at `speed` for `duration`,
    starting from the world frame pose (x, y, theta).
    """
    speed: float
    duration: float
    x: float
    y: float
    theta: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class CommandChannel(ABC):
    """Anything that can carry an ActionCommand to a robot (bus, SDK, ...)."""

    @abstractmethod
    def publish(self, command: ActionCommand) -> None:
        ...


class RecordingChannel(CommandChannel):
    """Keeps every published command in memory, in publish order."""

    def __init__(self):
        self.commands: List[ActionCommand] = []

    def publish(self, command: ActionCommand) -> None:
        self.commands.append(command)

    @property
    def last(self) -> Optional[ActionCommand]:
        return self.commands[-1] if self.commands else None


class LoggingChannel(CommandChannel):
    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.log = log or logger
        self.level = level

    def publish(self, command: ActionCommand) -> None:
        self.log.log(
            self.level,
            "action command: speed=%.3f duration=%.3f pose=(%.3f, %.3f, %.3f)",
            command.speed, command.duration, command.x, command.y, command.theta,
        )
