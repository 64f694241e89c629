"""Motor PWM routing: which output-compare module drives which wheel input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

from rovercore.command_list import MsgType

PWM_PERIOD = 7200  # OCxRS: 10 kHz edge-aligned PWM
STRAIGHT_COMPARE = 3600  # OCxR for forward/backward motion
ROTATION_COMPARE = 5000  # OCxR for rotations in place


class Wheel(Enum):
    """Motor driver inputs, valued by their remappable pin number."""

    LEFT_BACKWARD = 65
    LEFT_FORWARD = 66
    RIGHT_BACKWARD = 67
    RIGHT_FORWARD = 68


class OutputCompare(IntEnum):
    """Output-compare modules, valued by their peripheral pin select code."""

    OC1 = 0b010000
    OC2 = 0b010001
    OC3 = 0b010010
    OC4 = 0b010011


@dataclass(frozen=True)
class DriveConfig:
    """Routing of output-compare modules to wheel inputs and their duty setting."""

    routes: tuple[tuple[Wheel, OutputCompare], ...] = ()
    compare: int = 0
    period: int = PWM_PERIOD

    def output_for(self, wheel: Wheel) -> Optional[OutputCompare]:
        """The module driving ``wheel``, or None if the input is idle."""
        return dict(self.routes).get(wheel)

    def pin_select(self, wheel: Wheel) -> int:
        """Value written to the wheel's remap register (0 when idle)."""
        output = self.output_for(wheel)
        return 0 if output is None else int(output)

    @property
    def active_outputs(self) -> frozenset[OutputCompare]:
        return frozenset(output for _, output in self.routes)

    @property
    def is_stopped(self) -> bool:
        return not self.routes

    @property
    def duty_cycle(self) -> float:
        """Fraction of the period each active output is high."""
        return 0.0 if self.is_stopped else self.compare / self.period


_MOTIONS: dict[int, DriveConfig] = {
    MsgType.FORWARD: DriveConfig(
        ((Wheel.RIGHT_FORWARD, OutputCompare.OC4), (Wheel.LEFT_FORWARD, OutputCompare.OC2)),
        STRAIGHT_COMPARE,
    ),
    MsgType.COUNTER_CLOCKWISE: DriveConfig(
        ((Wheel.RIGHT_FORWARD, OutputCompare.OC4), (Wheel.LEFT_BACKWARD, OutputCompare.OC1)),
        ROTATION_COMPARE,
    ),
    MsgType.CLOCKWISE: DriveConfig(
        ((Wheel.RIGHT_BACKWARD, OutputCompare.OC3), (Wheel.LEFT_FORWARD, OutputCompare.OC2)),
        ROTATION_COMPARE,
    ),
    MsgType.BACKWARD: DriveConfig(
        ((Wheel.RIGHT_BACKWARD, OutputCompare.OC3), (Wheel.LEFT_BACKWARD, OutputCompare.OC1)),
        STRAIGHT_COMPARE,
    ),
}

_STOP = DriveConfig()


def drive(motion: Union[int, MsgType]) -> DriveConfig:
    """Return the PWM configuration for a motion type; any unknown type stops."""
    return _MOTIONS.get(int(motion), _STOP)