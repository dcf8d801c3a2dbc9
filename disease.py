#disease.py

import constants as C
from species import Kind
import logger as log

def trigger_outbreak(animals, rng, probability=C.DISEASE_PROBABILITY):
    """
    With the given probability, infects one live animal chosen uniformly at random,
    whatever its species or prior state. Returns the infected animal, or None.
    """
    if rng.random() > probability:
        return None
    candidates = [animal for animal in animals if animal.is_alive]
    if not candidates:
        return None
    patient = candidates[rng.randrange(len(candidates))]
    patient.infect()
    log.log(f"Disease outbreak: a {patient.species.value} at {patient.location} has been infected.")
    return patient

def spread_disease(animal, field, rng):
    """
    Runs one step of an infected animal's illness. It first rolls against its
    species' disease death probability; if it survives, every live neighbour of
    the same species catches the disease. Returns True if the animal died.
    """
    if not animal.is_infected:
        return False

    if rng.random() <= animal.traits.disease_death_probability:
        animal.die(field, "disease")
        return True

    for where in field.adjacent_locations(animal.location):
        neighbour = field.get_occupant(where)
        if neighbour is None or neighbour.kind is not Kind.ANIMAL:
            continue
        if neighbour.species is animal.species and neighbour.is_alive:
            neighbour.infect()
    return False
