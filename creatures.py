# creatures.py

import constants as C
from species import Kind, Species, Sex, get_traits
from disease import spread_disease

class Organism:
    """
    Common life cycle of everything that occupies a cell.

    Organisms never hold a reference to the field. Every action that needs it is
    handed the field (and the shared random source) by the World, and the field
    keeps `location` up to date when it places the organism.
    """
    kind = None

    def __init__(self, species, age=0):
        self.species = species
        self.traits = get_traits(species)
        self.age = age  # Age of the organism, in steps
        self.is_alive = True
        self.location = None
        self.cause_of_death = None

    def die(self, field, cause):
        """Irrevocably kills the organism and removes it from the field."""
        if not self.is_alive:
            return
        self.is_alive = False
        self.cause_of_death = cause
        if self.location is not None:
            if field.get_occupant(self.location) is self:
                field.clear(self.location)
            self.location = None

    def increment_age(self, field):
        self.age += 1
        if self.age > self.traits.max_age:
            self.die(field, "old age")

    def can_breed(self, field):
        return self.age >= self.traits.breeding_age

    def breed(self, field, rng):
        """Returns the number of births this step (may be zero)."""
        births = 0
        if self.can_breed(field) and rng.random() <= self.traits.breeding_probability:
            births = rng.randrange(self.traits.max_litter_size) + 1
        return births

    def give_birth(self, field, rng, newborns):
        """New organisms are born into free neighbouring cells, nearest-in-shuffle first."""
        free = field.get_free_adjacent_locations(self.location)
        births = self.breed(field, rng)
        if len(free) <= self.traits.min_free_cells_for_birth:
            return
        for location in free[:births]:
            newborns.append(self.create_young(field, location, rng))

    def create_young(self, field, location, rng):
        raise NotImplementedError

class Animal(Organism):
    kind = Kind.ANIMAL

    def __init__(self, species, age=0, food_level=None, sex=None):
        super().__init__(species, age)
        if species is Species.PLANT:
            raise ValueError("An animal cannot be created with the plant species.")
        if self.traits.sex_gated_breeding and sex is None:
            raise ValueError(f"A {species.value} needs a sex.")
        # Steps left before starving. A newborn starts full.
        self.food_level = self.traits.food_value if food_level is None else food_level
        self.sex = sex if self.traits.sex_gated_breeding else None
        self.is_infected = False

    @classmethod
    def create_random(cls, species, field, location, rng, sex=None):
        """An animal for the initial population: random age and food level."""
        traits = get_traits(species)
        animal = cls(species,
                     age=rng.randrange(traits.max_age),
                     food_level=rng.randrange(traits.food_value),
                     sex=sex)
        field.place(animal, location)
        return animal

    @classmethod
    def create_newborn(cls, species, field, location, sex=None):
        animal = cls(species, sex=sex)
        field.place(animal, location)
        return animal

    def __repr__(self):
        sex = f" {self.sex.value}" if self.sex else ""
        return f"<Animal {self.species.value}{sex} age={self.age} food={self.food_level} at {self.location}>"

    def die(self, field, cause):
        super().die(field, cause)
        self.is_infected = False

    def infect(self):
        if self.is_alive:
            self.is_infected = True

    def increment_hunger(self, field):
        self.food_level -= 1
        if self.food_level <= 0:
            self.die(field, "starvation")

    def snow_survival_probability(self):
        """Chance of surviving one step of snow. Older animals are hardier."""
        if self.traits.snow_survival_probability is not None:
            return self.traits.snow_survival_probability
        age_ratio_sq = (self.age * self.age) / (self.traits.max_age * self.traits.max_age)
        return C.ANIMAL_SNOW_SURVIVAL_BASE + C.ANIMAL_SNOW_SURVIVAL_AGE_FACTOR * age_ratio_sq

    def act(self, field, rng, newborns, is_night=False):
        """
        Runs one step: age, hunger, disease, then (unless resting at night) birth,
        feeding and movement. Death at any stage ends the step for this animal.
        """
        if not self.is_alive:
            return

        # --- 1. Aging and hunger ---
        self.increment_age(field)
        if self.is_alive:
            self.increment_hunger(field)

        # --- 2. Disease ---
        if self.is_alive:
            spread_disease(self, field, rng)

        if not self.is_alive or (is_night and self.traits.nocturnal):
            return

        # --- 3. Birth, feeding and movement ---
        self.give_birth(field, rng, newborns)
        new_location = self.find_food(field)
        if new_location is None:
            # No food found - try to move to a free location.
            new_location = field.free_adjacent_location(self.location)
        if new_location is not None:
            field.place(self, new_location)
        else:
            self.die(field, "overcrowding")

    def can_breed(self, field):
        # A female of a sexed species also needs an eligible partner next to her.
        if self.traits.sex_gated_breeding and self.sex is Sex.FEMALE:
            if not self.find_breeding_partner(field):
                return False
        return self.age >= self.traits.breeding_age

    def find_breeding_partner(self, field):
        """True if a live male of this species that can breed is next to this animal."""
        for where in field.adjacent_locations(self.location):
            other = field.get_occupant(where)
            if other is None or other.kind is not Kind.ANIMAL or not other.is_alive:
                continue
            if other.species is self.species and other.sex is Sex.MALE and other.can_breed(field):
                return True
        return False

    def give_birth(self, field, rng, newborns):
        # Males of a sexed species never give birth.
        if self.traits.sex_gated_breeding and self.sex is not Sex.FEMALE:
            return
        super().give_birth(field, rng, newborns)

    def create_young(self, field, location, rng):
        sex = None
        if self.traits.sex_gated_breeding:
            sex = Sex.FEMALE if rng.randrange(2) == 0 else Sex.MALE
        return Animal.create_newborn(self.species, field, location, sex=sex)

    def find_food(self, field):
        """
        Eats the first live food source among the neighbours. Prey animals are
        killed; plants lose `food_capacity` of their size. The food level is reset
        either way, but only an exhausted food source reports its location.
        """
        for where in field.adjacent_locations(self.location):
            food = field.get_occupant(where)
            if food is None or not food.is_alive or food.species is not self.traits.diet:
                continue
            self.food_level = self.traits.food_value
            if food.kind is Kind.PLANT:
                food.reduce_size(self.traits.food_capacity, field)
                if food.is_alive:
                    return None
            else:
                food.die(field, "eaten")
            return where
        return None

class Plant(Organism):
    kind = Kind.PLANT

    def __init__(self, age=0, size=C.PLANT_INITIAL_SIZE):
        super().__init__(Species.PLANT, age)
        self.size = size

    @classmethod
    def create(cls, field, location, age=0, size=C.PLANT_INITIAL_SIZE):
        plant = cls(age=age, size=size)
        field.place(plant, location)
        return plant

    def __repr__(self):
        return f"<Plant age={self.age} size={self.size} at {self.location}>"

    def die(self, field, cause):
        super().die(field, cause)
        self.size = 0

    def grow(self):
        self.size += C.PLANT_GROWTH_RATE

    def reduce_size(self, amount, field):
        """Loses `amount` of size. Losing all of it kills the plant."""
        if amount >= self.size:
            self.die(field, "eaten")
            return
        self.size -= amount

    def wind_survival_probability(self):
        """Larger plants are more likely to survive a windy step."""
        return C.PLANT_WIND_SURVIVAL_BASE + self.size // C.PLANT_WIND_SURVIVAL_SIZE_DIVISOR

    def snow_survival_probability(self):
        """Larger plants are more likely to survive a snowy step."""
        return C.PLANT_SNOW_SURVIVAL_BASE + self.size // C.PLANT_SNOW_SURVIVAL_SIZE_DIVISOR

    def act(self, field, rng, newborns):
        if not self.is_alive:
            return

        self.increment_age(field)
        if not self.is_alive:
            return

        self.give_birth(field, rng, newborns)
        self.grow()
        if field.free_adjacent_location(self.location) is None:
            # Overcrowding.
            self.die(field, "overcrowding")

    def create_young(self, field, location, rng):
        return Plant.create(field, location)
