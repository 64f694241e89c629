"""Control loop of the rover: command reception, state machine and periodic tasks."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Optional, Sequence, Union

from rovercore.adc import get_battery_voltage, get_ir_distance
from rovercore.circular_buffer import CircularBuffer
from rovercore.command_list import Command, CommandList, CommandListFullError
from rovercore.led import INDICATORS, LD1, LedBank
from rovercore.parser import MessageParser, extract_integer, next_value
from rovercore.pwm import DriveConfig, drive
from rovercore.scheduler import Scheduler

CONTROL_RATE_HZ = 1000
OBSTACLE_DISTANCE = 20
ACK_ACCEPTED = "$MACK,1*\n"
ACK_REJECTED = "$MACK,0*\n"
COMMAND_MESSAGE = "PCCMD"

STOP = 0


class RobotState(IntEnum):
    """Top-level operating state."""

    WAIT_FOR_START = 0
    EXECUTE = 1


class RobotController:
    """One rover: UART queues, command FIFO, LEDs, motors and a 1 kHz task loop.

    Each call to :meth:`step` is one pass of the control loop, i.e. one millisecond.
    """

    def __init__(self) -> None:
        self.buffer_rx = CircularBuffer()
        self.buffer_tx = CircularBuffer()
        self.commands = CommandList()
        self.parser = MessageParser()
        self.current_command = Command()
        self.leds = LedBank()
        self.state = RobotState.WAIT_FOR_START
        self.drive_config: DriveConfig = drive(STOP)
        self.battery_voltage = 0.0
        self.distance = 0
        self._adc_battery = 0
        self._adc_distance = 0
        self._button_pending = False

        self.scheduler = Scheduler()
        self.scheduler.add("blink_a0", 1000, self._task_blink_a0)
        self.scheduler.add("blink_indicators", 1000, self._task_blink_indicators)
        self.scheduler.add("get_adc", 1, self._task_get_adc)
        self.scheduler.add("send_battery", 1000, self._task_send_battery_voltage)
        self.scheduler.add("send_distance", 100, self._task_send_distance)
        self.scheduler.add("pwm_control", 1, self._task_pwm_control)

    # --- external events -------------------------------------------------

    def receive(self, data: Union[str, bytes]) -> int:
        """Queue incoming UART bytes; return how many fitted (the rest are dropped)."""
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("latin-1")
        return self.buffer_rx.write_all(data)

    def press_button(self) -> None:
        """Register a (debounced) press of the start/stop button."""
        self._button_pending = True

    def set_adc(self, adc_battery: int, adc_distance: int) -> None:
        """Set the raw readings the next ADC sampling task will see."""
        self._adc_battery = adc_battery
        self._adc_distance = adc_distance

    def transmitted(self) -> str:
        """Send everything waiting in the transmit queue and return it."""
        return "".join(self.buffer_tx.drain())

    # --- control loop ----------------------------------------------------

    def step(self) -> None:
        """Run one pass of the control loop."""
        self._parsing_process()

        if self.state is RobotState.WAIT_FOR_START:
            self.drive_config = drive(STOP)
            self.scheduler.set_enabled("blink_a0", True)
            self.scheduler.set_enabled("blink_indicators", True)
            if self._take_button():
                self.state = RobotState.EXECUTE
        elif self.state is RobotState.EXECUTE:
            self.scheduler.set_enabled("blink_indicators", False)
            self.leds.turn_off(INDICATORS)
            if self._take_button():
                self.state = RobotState.WAIT_FOR_START

        self.scheduler.tick()

    def _take_button(self) -> bool:
        pressed = self._button_pending
        self._button_pending = False
        return pressed

    def _send(self, text: str) -> None:
        self.buffer_tx.write_all(text)

    def _parsing_process(self) -> None:
        if self.buffer_rx.is_empty():
            return
        message = self.parser.feed(self.buffer_rx.read())
        if message is None or not message.msg_type.startswith(COMMAND_MESSAGE):
            return
        payload = message.payload
        cmd_type = extract_integer(payload)
        cmd_time = extract_integer(payload[next_value(payload, 0):])
        try:
            self.commands.enqueue(cmd_type, cmd_time)
        except CommandListFullError:
            self._send(ACK_REJECTED)
        else:
            self._send(ACK_ACCEPTED)

    # --- periodic tasks --------------------------------------------------

    def _task_blink_a0(self) -> None:
        self.leds.toggle(LD1)

    def _task_blink_indicators(self) -> None:
        self.leds.toggle(INDICATORS)

    def _task_get_adc(self) -> None:
        self.battery_voltage = get_battery_voltage(self._adc_battery)
        self.distance = int(get_ir_distance(self._adc_distance))

    def _task_send_battery_voltage(self) -> None:
        self._send(f"$MBATT,{self.battery_voltage:.2f}*\n")

    def _task_send_distance(self) -> None:
        self._send(f"$MDIST,{self.distance}*\n")

    def _task_pwm_control(self) -> None:
        cmd = self.current_command
        if self.state is RobotState.EXECUTE:
            if cmd.time == 0:
                nxt = self.commands.dequeue()
                if nxt is not None:
                    cmd.type, cmd.time = nxt.type, nxt.time
                self.drive_config = drive(cmd.type)
                cmd.type = STOP
            if cmd.time != 0:
                cmd.time -= 1
            if self.distance <= OBSTACLE_DISTANCE:
                cmd.type = STOP
                self.drive_config = drive(STOP)
        if self.state is RobotState.WAIT_FOR_START:
            cmd.time = 0
            cmd.type = STOP


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the control loop for a number of ticks, printing what is transmitted."""
    ap = argparse.ArgumentParser(prog="rovercore", description="Simulate the rover control loop.")
    ap.add_argument("messages", nargs="*", help="text to send to the rover's UART")
    ap.add_argument("--ticks", type=int, default=CONTROL_RATE_HZ, help="loop passes (1 ms each)")
    ap.add_argument("--battery-adc", type=int, default=0, help="raw battery ADC reading")
    ap.add_argument("--distance-adc", type=int, default=0, help="raw IR sensor ADC reading")
    ap.add_argument("--start", action="store_true", help="press the start button first")
    args = ap.parse_args(argv)

    if args.ticks < 0:
        ap.error("--ticks must not be negative")

    controller = RobotController()
    controller.set_adc(args.battery_adc, args.distance_adc)
    if args.start:
        controller.press_button()

    pending = "".join(args.messages)
    for _ in range(args.ticks):
        if pending:
            pending = pending[controller.receive(pending):]
        controller.step()
        sys.stdout.write(controller.transmitted())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())