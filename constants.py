# constants.py

# =============================================================================
# --- SIMULATION & GRID SETTINGS ---
# =============================================================================
DEFAULT_DEPTH = 200 # Number of grid rows used when no valid size is given
DEFAULT_WIDTH = 250 # Number of grid columns used when no valid size is given
LONG_RUN_STEPS = 4000 # Length of a "long" run from the interactive runner
UI_LOG_INTERVAL_STEPS = 100 # Population statistics are logged this often

# --- Day / Night ---
# Night is every fourth step, first occurring on the fourth step (step index 3).
NIGHT_CYCLE_LENGTH = 4
NIGHT_PHASE_INDEX = 3

# =============================================================================
# --- POPULATION SEEDING ---
# =============================================================================
# The probability that a given species is created in any given grid cell.
# The rolls are made in this order and the first success claims the cell, so
# the effective share of the later entries is lower than the raw number.
# The elephant coefficient is split evenly between males and females.
CREATION_COEFFICIENTS = (
    ("fox", 0.06),
    ("rabbit", 0.11),
    ("eagle", 0.05),
    ("cow", 0.07),
    ("plant", 0.15),
    ("elephant", 0.1),
)

# =============================================================================
# --- DISEASE ---
# =============================================================================
# The probability that some animal catches the disease on each step.
DISEASE_PROBABILITY = 0.07

# =============================================================================
# --- WEATHER ---
# =============================================================================
# Cumulative thresholds of the weighted weather draw. Read as target shares
# these give snow 5%, wind 13%, rain 16% and sun for the remainder.
WEATHER_SNOW_THRESHOLD = 0.05
WEATHER_WIND_THRESHOLD = 0.18
WEATHER_RAIN_THRESHOLD = 0.34
# False gives each threshold its own fresh roll, True draws a
# single roll against the cumulative thresholds.
WEATHER_CATEGORICAL_SAMPLING = False

# =============================================================================
# --- ANIMAL SPECIES ---
# =============================================================================
# Snow survival for most animals is 0.5 + 1.6 * age^2 / max_age^2.
ANIMAL_SNOW_SURVIVAL_BASE = 0.5
ANIMAL_SNOW_SURVIVAL_AGE_FACTOR = 1.6

# --- Fox ---
FOX_BREEDING_AGE = 15
FOX_MAX_AGE = 150
FOX_BREEDING_PROBABILITY = 0.08
FOX_MAX_LITTER_SIZE = 2
FOX_FOOD_VALUE = 9 # Steps a fox can go on a single rabbit
FOX_DISEASE_DEATH_PROBABILITY = 0.27

# --- Rabbit ---
RABBIT_BREEDING_AGE = 5
RABBIT_MAX_AGE = 40
RABBIT_BREEDING_PROBABILITY = 0.37
RABBIT_MAX_LITTER_SIZE = 4
RABBIT_FOOD_CAPACITY = 1 # Plant size eaten per feed
RABBIT_FOOD_VALUE = 8 # Steps a rabbit can go on a single feed
RABBIT_DISEASE_DEATH_PROBABILITY = 0.37
RABBIT_SNOW_SURVIVAL_PROBABILITY = 0.9 # Rabbits burrow; their snow survival does not depend on age

# --- Eagle ---
EAGLE_BREEDING_AGE = 12
EAGLE_MAX_AGE = 250
EAGLE_BREEDING_PROBABILITY = 0.18
EAGLE_MAX_LITTER_SIZE = 4
EAGLE_FOOD_VALUE = 10 # Steps an eagle can go on a single rabbit
EAGLE_DISEASE_DEATH_PROBABILITY = 0.27

# --- Cow ---
COW_BREEDING_AGE = 8
COW_MAX_AGE = 100
COW_BREEDING_PROBABILITY = 0.16
COW_MAX_LITTER_SIZE = 4
COW_FOOD_CAPACITY = 5
COW_FOOD_VALUE = 7
COW_DISEASE_DEATH_PROBABILITY = 0.37

# --- Elephant ---
ELEPHANT_BREEDING_AGE = 5
ELEPHANT_MAX_AGE = 200
ELEPHANT_BREEDING_PROBABILITY = 0.9
ELEPHANT_MAX_LITTER_SIZE = 4
ELEPHANT_FOOD_CAPACITY = 8
ELEPHANT_FOOD_VALUE = 10
ELEPHANT_DISEASE_DEATH_PROBABILITY = 0.17
# A female only gives birth when more than this many neighbouring cells are free.
ELEPHANT_MIN_FREE_CELLS_FOR_BIRTH = 4

# =============================================================================
# --- PLANTS ---
# =============================================================================
PLANT_BREEDING_AGE = 2
PLANT_MAX_AGE = 40
PLANT_BREEDING_PROBABILITY = 0.09
PLANT_MAX_LITTER_SIZE = 4
PLANT_INITIAL_SIZE = 1
PLANT_GROWTH_RATE = 3 # Size gained per grow
# Survival = base + size // divisor. Integer steps: a plant needs a size of
# 20 before wind stops threatening it.
PLANT_WIND_SURVIVAL_BASE = 0.7
PLANT_WIND_SURVIVAL_SIZE_DIVISOR = 20
PLANT_SNOW_SURVIVAL_BASE = 0.7
PLANT_SNOW_SURVIVAL_SIZE_DIVISOR = 50

# =============================================================================
# --- UI, RUNNER & COLORS ---
# =============================================================================
SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 800 # Includes the status bar
UI_STATUS_BAR_HEIGHT = 60
UI_FONT_SIZE = 24
UI_TEXT_POS_X = 10
UI_LINE_SPACING = 20
CLOCK_TICK_RATE = 60
# Steps per second for each speed key [0-5].
STEPS_PER_SECOND = {
    0: 1.0,
    1: 2.0,
    2: 5.0,
    3: 10.0,
    4: 20.0,
    5: 60.0
}
DEFAULT_SPEED_LEVEL = 3
PROFILER_PRINT_LINE_COUNT = 20

COLOR_WHITE = (255, 255, 255)
COLOR_EMPTY = (255, 255, 255); COLOR_STATUS_BAR = (30, 30, 30)
SPECIES_COLORS = {
    "fox": (0, 0, 255), # Blue
    "rabbit": (255, 200, 0), # Orange
    "eagle": (255, 0, 0), # Red
    "cow": (0, 0, 0), # Black
    "elephant": (255, 0, 255), # Magenta
    "plant": (0, 255, 0), # Green
}
