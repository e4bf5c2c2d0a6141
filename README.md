# handrouter

Building blocks for a handheld CNC router. The tool body is moved by hand
while a small CoreXY gantry and a lead-screw Z axis keep the cutter on the
planned path. This package holds the parts of that job that do not depend
on the hardware: machine constants, data types, geometry, preset designs,
G-code parsing, actuator frame conversion and display layout helpers.

## Modules

- `handrouter.config` – machine constants: sensor layout, belt and lead
  screw conversion factors (`CONV_BELT`, `CONV_LEAD`), speed limits,
  workspace ranges, rest height and timing intervals.
- `handrouter.model` – the enums `State`, `CutState`, `DesignType` and
  `Feature`; the dataclasses `RouterPose`, `CalParams` and `Point`;
  `Path`, a bounded list of points (`append` raises `OverflowError` when
  full, `clear` empties it and resets `min_z`); and `Position`, a tool
  target clamped to the gantry's reach, whose `set` returns whether any
  coordinate had to be clamped.
- `handrouter.geometry` – `distance`, `clamp`, `principal_angle`,
  `map_range`, `signed_distance` (point to gantry line), `angle_from` and
  `direction`.
- `handrouter.pid` – `PIDController` with `compute(error, delta_time)` and
  `reset()`.
- `handrouter.registers` – `format_hex` and `format_bin` render a 32-bit
  driver register value as `12:34:56:78` or four dot-separated bytes of
  bits.
- `handrouter.actuator` – `ActuationController`, which rotates the error
  between a goal and the router pose into the router frame and stores it in
  a clamped `Position`; `cartesian_to_motor` and `motor_to_cartesian`
  convert between that frame and CoreXY step counts; `rest_height_steps`
  gives the Z step target for the rest height.
- `handrouter.path_generators` – preset designs (`line_path`, `sine_path`,
  `zigzag_path`, `double_line_path`, `diamond_path`, `square_sine_path`,
  `square_wave_path`, `square_make_path`, `circle_path`,
  `drill_square_path`), chosen by menu index with
  `preset_path(index, thickness)`; an unknown index raises `ValueError`.
- `handrouter.gcode` – `parse_gcode` turns G0/G1/G98 moves into a `Path`
  (a G98 point becomes a three-point drill cycle, heights above 4 mm are
  clamped); `parse_gcode_file` does the same for a file; also
  `is_valid_command`, `is_valid_coordinate` and `parent_path`.
- `handrouter.ui` – display layout helpers: `file_window`, `scroll_text`,
  `truncate_text`, `list_directory` (directories first, hidden entries
  left out, a `../` entry below the root), `target_offset`,
  `progress_pixels` and `exponential_skew`.

## Installing

```
pip install .
```

## Example

```python
from handrouter.actuator import cartesian_to_motor
from handrouter.gcode import parse_gcode
from handrouter.model import Position
from handrouter.path_generators import preset_path
from handrouter.registers import format_hex

path = parse_gcode(["G1 X0 Y0 Z-1", "G1 X10 Y0 Z-1"], feedrate=5.0)
print(len(path))                              # 2

line = preset_path(0, thickness=3.0)
print(len(line))                              # 1000

print(Position(15.0, 0.0, 0.0).valid)         # False: x is clamped to 10 mm
print(cartesian_to_motor(Position(1.0, 1.0, 0.0)))  # (50, 0, 0)

print(format_hex(0x12345678))                 # 12:34:56:78
```

## What it does not do

The package has no command to run and no control loop. It does not
interpolate a goal along a path over time, estimate the router's pose from
sensor readings, calibrate sensors, decide from tick to tick whether to
cut, write or read binary log files, or drive a menu session. It also does
not talk to motors, drivers, sensors, a screen or an encoder; it only
computes the values such hardware would be given.

## Tests

```
pip install .[test]
pytest
```