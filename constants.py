from oscillator.Vec2 import Vec2

# --- Window ---
WIDTH, HEIGHT = 1260, 520
FPS = 50
DELTA_TIME = 1.0 / FPS  # simulated seconds per tick

# --- Circuit defaults ---
DEFAULT_CAPACITANCE = 1.0     # F
DEFAULT_INDUCTANCE = 1.0      # H
DEFAULT_PEAK_VOLTAGE = 10.0   # V

CHARGES_COUNT = 20
CHARGES_VALUE = 50.0
LOOP_SIZE = Vec2(300, 300)
LOOP_ORIGIN = Vec2(100, 100)

# --- Plots ---
PERIODS = 1
SAMPLE_DENSITY = 200
PANEL_SIZE = Vec2(352 - 18, 212)
PANEL_ORIGINS = [
    Vec2(518, 18),   # voltage
    Vec2(888, 18),   # current
    Vec2(518, 268),  # energies
    Vec2(888, 268),  # charge
]

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (40, 40, 40)
YELLOW = (255, 255, 0)
