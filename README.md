# rovercore

Control logic for a small differential-drive rover, run entirely in
software: a control loop that receives commands as text, queues them,
drives the motors and reports battery voltage and obstacle distance.

## Modules

- `rovercore.circular_buffer` — `CircularBuffer`, a fixed-size ring buffer
  of characters (default size 32). One slot is kept free, so a buffer of
  size 32 holds 31 characters. `write` raises `BufferFullError`, `read`
  raises `BufferEmptyError`; `write_all` writes what fits and returns the
  count, `drain` yields until empty.
- `rovercore.parser` — `MessageParser`, a byte-by-byte state machine for
  messages of the form `$TYPE,payload*` (type at most 6 characters,
  payload at most 100). `feed` returns a `Message` when one completes,
  `feed_all` returns the list of completed messages. `extract_integer`
  reads a signed integer up to a `,`; `next_value` gives the index of the
  next comma-separated value.
- `rovercore.command_list` — `CommandList`, a FIFO of `Command` entries
  holding at most ten by default. `enqueue` raises `CommandListFullError`
  when full; `dequeue` returns `None` when empty. `MsgType` names the
  motion types: `FORWARD` (1), `COUNTER_CLOCKWISE` (2), `CLOCKWISE` (3),
  `BACKWARD` (4).
- `rovercore.scheduler` — `Scheduler` runs registered `Heartbeat` tasks in
  registration order; each `tick` advances every task's counter and runs
  the enabled tasks whose period has elapsed.
- `rovercore.adc` — `convert_to`, `get_battery_voltage` and
  `get_ir_distance` turn raw 10-bit readings (3.3 V reference) into
  battery volts (1:3 divider) and infrared distance in centimetres.
- `rovercore.pwm` — `drive(motion)` returns a `DriveConfig` telling which
  `OutputCompare` module drives which `Wheel` input and at what duty cycle;
  unknown motion types give a stopped configuration.
- `rovercore.led` — `LedBank` with `turn_on`, `turn_off` and `toggle` for
  LD1 (1), LD2 (2) and both turn indicators together (3).
- `rovercore.timer` — `timer_config(ms)` chooses a prescaler and 16-bit
  period value for a 72 MHz clock, `wait_chunks(ms)` splits a wait into
  periods of at most 200 ms, and `uart_brg_value` computes the UART baud
  rate generator value (9600 baud by default).
- `rovercore.controller` — `RobotController`, the control loop that ties
  the pieces together, and the `main` command.

## Installation

```
pip install .
```

## Example

```python
from rovercore.controller import RobotController

robot = RobotController()
robot.receive("$PCCMD,1,500*")   # queue: forward for 500 ticks
robot.set_adc(700, 200)          # raw battery and distance readings
robot.press_button()             # leave "wait for start"
for _ in range(1000):
    robot.step()                 # one 1 ms pass of the control loop
print(robot.transmitted())       # acknowledgements and telemetry
```

The controller reads one received character per `step`. A `PCCMD`
message carries a motion type and a duration in ticks; it is answered
with `$MACK,1*` when queued and `$MACK,0*` when the queue is full.
Battery voltage is sent once a second as `$MBATT,<volts>*` and distance
ten times a second as `$MDIST,<cm>*`, each followed by a newline.

The controller starts in `RobotState.WAIT_FOR_START`, where the motors are
stopped and LD1 and the indicators blink at 1 Hz. A button press switches
to `RobotState.EXECUTE`, where queued commands are run one after another;
the motors stop whenever the measured distance is 20 cm or less. Another
press returns to waiting.

## Command line

```
rovercore [MESSAGES ...] [--ticks N] [--battery-adc N] [--distance-adc N] [--start]
```

runs the control loop for `--ticks` passes (default 1000, one millisecond
each), feeding the given messages to the receive queue, and prints
everything the controller transmits. `--start` presses the start button
before the first pass.

## What it does not do

Nothing here touches hardware: there is no serial port, no ADC sampling,
no timer that actually waits and no motor output. Readings are given with
`set_adc`, button presses with `press_button`, and the motor state is the
`DriveConfig` held in `RobotController.drive_config`.

## Tests

```
pip install .[test]
pytest
```