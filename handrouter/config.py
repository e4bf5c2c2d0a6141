"""Machine constants: geometry, kinematics, sensing and timing."""

import math

# Capacities
MAX_POINTS = 8000
MAX_FILES = 100
ANGLE_THRESHOLD = math.pi / 6  # cuttable-region angle threshold (rad)

# Sensor properties
NUM_SENSORS = 4
CPI = 2500  # counts per inch
LX = 120.0  # x length of the rectangular sensor layout (mm)
LY = 140.0  # y length of the rectangular sensor layout (mm)
X_SENSOR_OFFSET = -2.32
Y_SENSOR_OFFSET = -3.2

# Motor properties
STEPS_PER_REV = 200
MICROSTEPS = 4
BELT_PITCH = 2.0  # mm
PULLEY_TEETH = 16
CONV_BELT = (STEPS_PER_REV * MICROSTEPS) / (BELT_PITCH * PULLEY_TEETH)  # mm -> steps
LEAD = 8.0  # lead screw lead (mm)
CONV_LEAD = (STEPS_PER_REV * MICROSTEPS) / LEAD  # mm -> steps
STEP_PULSE_WIDTH = 20.0
MAX_CURRENT_RMS = 1273.0  # mA
MAX_SPEED_AB = 140.0 * CONV_BELT  # steps/s
MAX_ACCEL_AB = 2000.0 * CONV_BELT  # steps/s^2
MAX_SPEED_Z = 180.0 * CONV_LEAD  # steps/s
MAX_ACCEL_Z = 3000.0 * CONV_LEAD  # steps/s^2
RETRACT = 2.0  # mm
ZERO_SPEED_FAST = 20.0  # mm/s
ZERO_SPEED_SLOW = 4.0  # mm/s
ZERO_ACCEL = 200.0  # mm/s^2
FEEDRATE_DEFAULT = 5.0  # mm/s
HOLE_FEEDRATE = 5.0  # mm/s

# Material properties
MAX_THICKNESS = 15.0  # mm
REST_HEIGHT = 2.0  # mm
HOLE_TOLERANCE = 0.25  # mm

# Gantry geometry
X_RANGE = 20.0
X_RANGE_HARD = 24.0
Y_RANGE = 20.0
Y_RANGE_HARD = 24.0
Z_RANGE = 34.0
Z_RANGE_HARD = 34.0
X_LIMIT_OFFSET = 1.32
Y_LIMIT_OFFSET = 1.48
Z_LIMIT_OFFSET = 2.29
WALL_BUFFER = 3.0

# Timing
DEBOUNCE_DELAY_MS = 50
DT_DEBUG_MS = 500
DT_STOPWATCH_MS = 500
DT_PLOT_MS = 50
DT_OUTPUT_MS = 20
DT_OUTPUT_SD_MS = 10
DT_SENSE_US = 900
DT_CONTROL_US = 500