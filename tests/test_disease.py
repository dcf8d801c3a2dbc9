# tests/test_disease.py
from creatures import Animal
from disease import trigger_outbreak, spread_disease
from field import Location
from species import Species


def place_animal(field, species, location, **kwargs):
    animal = Animal(species, **kwargs)
    field.place(animal, location)
    return animal


def test_outbreak_infects_exactly_one_animal(field, rng):
    animals = [place_animal(field, Species.COW, Location(0, col)) for col in range(5)]
    patient = trigger_outbreak(animals, rng, probability=1.0)
    assert patient in animals
    assert [animal.is_infected for animal in animals].count(True) == 1
    assert patient.is_infected


def test_outbreak_does_nothing_when_roll_fails(field, rng):
    animals = [place_animal(field, Species.COW, Location(0, col)) for col in range(5)]
    assert trigger_outbreak(animals, rng, probability=0.0) is None
    assert not any(animal.is_infected for animal in animals)


def test_outbreak_on_empty_population_is_harmless(rng):
    assert trigger_outbreak([], rng, probability=1.0) is None


def test_outbreak_only_picks_live_animals(field, rng):
    dead = place_animal(field, Species.FOX, Location(1, 1))
    alive = place_animal(field, Species.FOX, Location(3, 3))
    dead.die(field, "snow")
    for _ in range(10):
        assert trigger_outbreak([dead, alive], rng, probability=1.0) is alive
    assert not dead.is_infected


def test_uninfected_animal_never_rolls_for_disease(field, always_rng):
    rabbit = place_animal(field, Species.RABBIT, Location(5, 5))
    assert spread_disease(rabbit, field, always_rng) is False
    assert rabbit.is_alive


def test_infected_animal_can_die_of_disease(field, always_rng):
    rabbit = place_animal(field, Species.RABBIT, Location(5, 5))
    neighbour = place_animal(field, Species.RABBIT, Location(5, 6))
    rabbit.infect()
    assert spread_disease(rabbit, field, always_rng) is True
    assert not rabbit.is_alive
    assert rabbit.cause_of_death == "disease"
    assert not rabbit.is_infected
    assert not neighbour.is_infected
    assert field.get_occupant(Location(5, 5)) is None


def test_disease_spreads_only_to_neighbours_of_the_same_species(field, never_rng):
    rabbit = place_animal(field, Species.RABBIT, Location(5, 5))
    same_species = place_animal(field, Species.RABBIT, Location(5, 6))
    other_species = place_animal(field, Species.FOX, Location(4, 4))
    far_away = place_animal(field, Species.RABBIT, Location(8, 8))
    rabbit.infect()
    assert spread_disease(rabbit, field, never_rng) is False
    assert rabbit.is_alive
    assert same_species.is_infected
    assert not other_species.is_infected
    assert not far_away.is_infected


def test_disease_does_not_reach_dead_neighbours(field, never_rng):
    rabbit = place_animal(field, Species.RABBIT, Location(5, 5))
    neighbour = place_animal(field, Species.RABBIT, Location(5, 6))
    neighbour.die(field, "eaten")
    rabbit.infect()
    spread_disease(rabbit, field, never_rng)
    assert not neighbour.is_infected
    neighbour.infect()
    assert not neighbour.is_infected


def test_infection_is_only_cleared_by_death(field, never_rng):
    cow = place_animal(field, Species.COW, Location(5, 5), food_level=50)
    cow.infect()
    for _ in range(5):
        cow.act(field, never_rng, [])
        assert cow.is_alive
        assert cow.is_infected
