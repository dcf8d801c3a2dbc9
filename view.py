#view.py

from species import Species

def population_counts(field):
    """Counts the occupants of each species in the field."""
    counts = {species: 0 for species in Species}
    for occupant in field.occupants():
        counts[occupant.species] += 1
    return counts

def is_field_viable(field):
    """
    A field is worth simulating while more than one class of occupant is present.
    The two elephant sexes count as separate classes.
    """
    present = {(occupant.species, getattr(occupant, "sex", None)) for occupant in field.occupants()}
    return len(present) > 1

def format_population(counts):
    return ", ".join(f"{species.value.capitalize()}: {count}" for species, count in counts.items())

class HeadlessView:
    """
    A view that draws nothing. It remembers what it was last told so automated
    runs and tests can inspect it.
    """
    def __init__(self):
        self.last_step = None
        self.last_counts = {}
        self.info_text = ""

    def show_status(self, step, field):
        self.last_step = step
        self.last_counts = population_counts(field)

    def is_viable(self, field):
        return is_field_viable(field)

    def set_info_text(self, text):
        self.info_text = text
