#world.py

import random
import time
from creatures import Animal, Plant
import constants as C
from field import Field, Location
from species import Species, Sex, ANIMAL_SPECIES
from disease import trigger_outbreak
from weather import random_weighted_weather, apply_weather
from time_manager import TimeManager
from view import HeadlessView, population_counts, format_population
import logger as log

class World:
    """
    The stepping engine. Owns the field, the live animals and plants, the step
    counter and the weather, and drives one discrete step at a time.

    Every stochastic decision is drawn from `self.rng`, so two worlds built with
    the same seed and size produce the same run.
    """
    def __init__(self, depth=C.DEFAULT_DEPTH, width=C.DEFAULT_WIDTH, view=None, seed=None, rng=None, populate=True):
        log.log("Creating a new World...")
        if width <= 0 or depth <= 0:
            log.log(f"The dimensions must be greater than zero (got {depth}x{width}). Using default values.")
            depth = C.DEFAULT_DEPTH
            width = C.DEFAULT_WIDTH

        self.rng = rng if rng is not None else random.Random(seed)
        self.view = view if view is not None else HeadlessView()
        self.time_manager = TimeManager()
        self.field = Field(depth, width, self.rng)
        self._animals = []
        self._plants = []
        self.disease_probability = C.DISEASE_PROBABILITY
        self.last_log_step = 0

        # The weather for the first step.
        self.weather = random_weighted_weather(self.rng)
        log.log(f"World created with a {depth}x{width} field.")

        # Setup a valid starting point.
        self.reset(populate=populate)

    @property
    def animals(self):
        return tuple(self._animals)

    @property
    def plants(self):
        return tuple(self._plants)

    @property
    def step(self):
        return self.time_manager.step

    @property
    def is_night(self):
        return self.time_manager.is_night()

    def reset(self, populate=True):
        """Resets the simulation to a starting position and shows it."""
        self.time_manager.reset()
        self.last_log_step = 0
        self._animals.clear()
        self._plants.clear()
        self.field.clear_all()
        if populate:
            self.populate_world()
        log.log("World reset.")

        # Show the starting state in the view.
        self.view.show_status(self.step, self.field)
        self._show_info()

    def populate_world(self):
        """
        Fills the field cell by cell. For each cell the creation coefficients are
        rolled in order and the first success claims it; otherwise it stays empty.
        """
        log.log("Populating the world with initial creatures...")
        for row in range(self.field.depth):
            for col in range(self.field.width):
                for name, coefficient in C.CREATION_COEFFICIENTS:
                    if self.rng.random() <= coefficient:
                        self._create_initial_occupant(Species(name), Location(row, col))
                        break
        counts = population_counts(self.field)
        log.log(f"World population complete. {format_population(counts)}")

    def _create_initial_occupant(self, species, location):
        if species is Species.PLANT:
            self._plants.append(Plant.create(self.field, location))
            return
        sex = None
        if species is Species.ELEPHANT:
            sex = Sex.FEMALE if self.rng.randrange(2) == 0 else Sex.MALE
        self._animals.append(Animal.create_random(species, self.field, location, self.rng, sex=sex))

    def spawn_animal(self, species, location, age=0, food_level=None, sex=None):
        """Registers a new animal at a free location and returns it."""
        if self.field.get_occupant(location) is not None:
            raise ValueError(f"Location {location} is already occupied.")
        animal = Animal(species, age=age, food_level=food_level, sex=sex)
        self.field.place(animal, location)
        self._animals.append(animal)
        return animal

    def spawn_plant(self, location, age=0, size=C.PLANT_INITIAL_SIZE):
        """Registers a new plant at a free location and returns it."""
        if self.field.get_occupant(location) is not None:
            raise ValueError(f"Location {location} is already occupied.")
        plant = Plant.create(self.field, location, age=age, size=size)
        self._plants.append(plant)
        return plant

    def simulate(self, num_steps, delay_seconds=0):
        """
        Runs the simulation for the given number of steps, stopping early if the
        view judges the field no longer viable. Returns the number of steps run.
        """
        steps_run = 0
        for _ in range(num_steps):
            if not self.view.is_viable(self.field):
                log.log(f"Simulation no longer viable after {steps_run} steps. Stopping.")
                break
            self.simulate_one_step()
            steps_run += 1
            if delay_seconds > 0:
                time.sleep(delay_seconds)
        return steps_run

    def simulate_one_step(self):
        """Runs a single step, updating every organism in place on the field."""
        # --- 1. Weather and disease ---
        apply_weather(self.weather, self._plants, self._animals, self.field, self.rng)
        trigger_outbreak(self._animals, self.rng, self.disease_probability)

        # --- 2. Let every organism act ---
        is_night = self.time_manager.is_night()
        new_animals = []
        for animal in self._animals:
            animal.act(self.field, self.rng, new_animals, is_night)

        new_plants = []
        for plant in self._plants:
            plant.act(self.field, self.rng, new_plants)

        # --- 3. Housekeeping ---
        self._process_housekeeping(new_animals, new_plants)

        self.time_manager.advance()
        # The weather for the next step.
        self.weather = random_weighted_weather(self.rng)

        if self.step - self.last_log_step >= C.UI_LOG_INTERVAL_STEPS:
            self._print_population_statistics()
            self.last_log_step = self.step

        self._show_info()
        self.view.show_status(self.step, self.field)

    def _process_housekeeping(self, new_animals, new_plants):
        """Adds newborns to the main lists and drops everything that died this step."""
        self._animals.extend(new_animals)
        self._plants.extend(new_plants)
        self._animals = [animal for animal in self._animals if animal.is_alive]
        self._plants = [plant for plant in self._plants if plant.is_alive]

    def _show_info(self):
        """Shows time of day and weather for the next step to be executed."""
        self.view.set_info_text(self.time_manager.get_display_string(self.weather))

    def _print_population_statistics(self):
        """Prints a formatted summary of the world's population statistics."""
        counts = population_counts(self.field)
        infected = sum(1 for animal in self._animals if animal.is_infected)

        log.log("\n--- Population Statistics ---")
        log.log(f"  > Report for Step {self.step} (weather next: {self.weather.value})")
        log.log(f"  Living Plants: {len(self._plants):,}")
        log.log(f"  Living Animals: {len(self._animals):,} ({infected:,} infected)")
        for species in ANIMAL_SPECIES:
            log.log(f"  - {species.value.capitalize()}: {counts[species]:,}")
        log.log("---------------------------\n")
