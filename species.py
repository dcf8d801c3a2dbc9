#species.py

from collections import namedtuple
from enum import Enum
import constants as C

class Kind(Enum):
    """What sort of occupant a field entry is."""
    ANIMAL = "animal"
    PLANT = "plant"

class Species(Enum):
    FOX = "fox"
    RABBIT = "rabbit"
    EAGLE = "eagle"
    COW = "cow"
    ELEPHANT = "elephant"
    PLANT = "plant"

class Sex(Enum):
    FEMALE = "female"
    MALE = "male"

# The immutable rule parameters of one species.
SpeciesTraits = namedtuple("SpeciesTraits", [
    "breeding_age", # Age at which breeding becomes possible, in steps
    "max_age", # Age beyond which the organism dies, in steps
    "breeding_probability", # Chance of a breeding roll succeeding, [0, 1]
    "max_litter_size", # Upper bound on births per successful roll
    "food_capacity", # Plant size eaten per feed; None for predators, which kill their prey
    "food_value", # Food level granted by a feed, in steps
    "disease_death_probability", # Chance an infected animal dies each step, [0, 1]
    "diet", # The Species this one searches for, Species.PLANT for herbivores
    "nocturnal", # Rests at night: no feeding, moving or breeding
    "sex_gated_breeding", # Needs an adjacent partner of the opposite sex to breed
    "aerial_hunter", # Hunts by sight and goes hungrier in the rain
    "snow_survival_probability", # Fixed snow survival; None means age-based
    "min_free_cells_for_birth", # Births need more free neighbouring cells than this
])

TRAITS = {
    Species.FOX: SpeciesTraits(
        breeding_age=C.FOX_BREEDING_AGE,
        max_age=C.FOX_MAX_AGE,
        breeding_probability=C.FOX_BREEDING_PROBABILITY,
        max_litter_size=C.FOX_MAX_LITTER_SIZE,
        food_capacity=None,
        food_value=C.FOX_FOOD_VALUE,
        disease_death_probability=C.FOX_DISEASE_DEATH_PROBABILITY,
        diet=Species.RABBIT,
        nocturnal=False,
        sex_gated_breeding=False,
        aerial_hunter=False,
        snow_survival_probability=None,
        min_free_cells_for_birth=0),
    Species.RABBIT: SpeciesTraits(
        breeding_age=C.RABBIT_BREEDING_AGE,
        max_age=C.RABBIT_MAX_AGE,
        breeding_probability=C.RABBIT_BREEDING_PROBABILITY,
        max_litter_size=C.RABBIT_MAX_LITTER_SIZE,
        food_capacity=C.RABBIT_FOOD_CAPACITY,
        food_value=C.RABBIT_FOOD_VALUE,
        disease_death_probability=C.RABBIT_DISEASE_DEATH_PROBABILITY,
        diet=Species.PLANT,
        nocturnal=False,
        sex_gated_breeding=False,
        aerial_hunter=False,
        snow_survival_probability=C.RABBIT_SNOW_SURVIVAL_PROBABILITY,
        min_free_cells_for_birth=0),
    Species.EAGLE: SpeciesTraits(
        breeding_age=C.EAGLE_BREEDING_AGE,
        max_age=C.EAGLE_MAX_AGE,
        breeding_probability=C.EAGLE_BREEDING_PROBABILITY,
        max_litter_size=C.EAGLE_MAX_LITTER_SIZE,
        food_capacity=None,
        food_value=C.EAGLE_FOOD_VALUE,
        disease_death_probability=C.EAGLE_DISEASE_DEATH_PROBABILITY,
        diet=Species.RABBIT,
        nocturnal=False,
        sex_gated_breeding=False,
        aerial_hunter=True,
        snow_survival_probability=None,
        min_free_cells_for_birth=0),
    Species.COW: SpeciesTraits(
        breeding_age=C.COW_BREEDING_AGE,
        max_age=C.COW_MAX_AGE,
        breeding_probability=C.COW_BREEDING_PROBABILITY,
        max_litter_size=C.COW_MAX_LITTER_SIZE,
        food_capacity=C.COW_FOOD_CAPACITY,
        food_value=C.COW_FOOD_VALUE,
        disease_death_probability=C.COW_DISEASE_DEATH_PROBABILITY,
        diet=Species.PLANT,
        nocturnal=True,
        sex_gated_breeding=False,
        aerial_hunter=False,
        snow_survival_probability=None,
        min_free_cells_for_birth=0),
    Species.ELEPHANT: SpeciesTraits(
        breeding_age=C.ELEPHANT_BREEDING_AGE,
        max_age=C.ELEPHANT_MAX_AGE,
        breeding_probability=C.ELEPHANT_BREEDING_PROBABILITY,
        max_litter_size=C.ELEPHANT_MAX_LITTER_SIZE,
        food_capacity=C.ELEPHANT_FOOD_CAPACITY,
        food_value=C.ELEPHANT_FOOD_VALUE,
        disease_death_probability=C.ELEPHANT_DISEASE_DEATH_PROBABILITY,
        diet=Species.PLANT,
        nocturnal=False,
        sex_gated_breeding=True,
        aerial_hunter=False,
        snow_survival_probability=None,
        min_free_cells_for_birth=C.ELEPHANT_MIN_FREE_CELLS_FOR_BIRTH),
    Species.PLANT: SpeciesTraits(
        breeding_age=C.PLANT_BREEDING_AGE,
        max_age=C.PLANT_MAX_AGE,
        breeding_probability=C.PLANT_BREEDING_PROBABILITY,
        max_litter_size=C.PLANT_MAX_LITTER_SIZE,
        food_capacity=None,
        food_value=None,
        disease_death_probability=None,
        diet=None,
        nocturnal=False,
        sex_gated_breeding=False,
        aerial_hunter=False,
        snow_survival_probability=None,
        min_free_cells_for_birth=0),
}

ANIMAL_SPECIES = tuple(species for species in Species if species is not Species.PLANT)

def get_traits(species):
    return TRAITS[species]
