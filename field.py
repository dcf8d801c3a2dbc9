#field.py

from collections import namedtuple
import numpy as np

# The eight offsets of the Chebyshev distance 1 neighbourhood.
NEIGHBOUR_OFFSETS = [(-1, -1), (-1, 0), (-1, 1),
                     (0, -1),           (0, 1),
                     (1, -1),  (1, 0),  (1, 1)]

class Location(namedtuple("Location", ["row", "col"])):
    """An immutable (row, col) coordinate in the field."""
    __slots__ = ()

    def __str__(self):
        return f"({self.row}, {self.col})"

class Field:
    """
    A rectangular grid in which each cell holds at most one occupant.

    The grid is a numpy object array indexed [row, col]. Occupants carry their own
    `location`; the field keeps that attribute in step with the grid whenever it
    places or clears them. Neighbour queries shuffle with the shared random source
    so that scanning order is unbiased yet reproducible for a given seed.
    """
    def __init__(self, depth, width, rng):
        self.depth = depth
        self.width = width
        self.rng = rng
        self.grid = np.empty((depth, width), dtype=object)

    def clear_all(self):
        """Empties every cell, detaching any occupants."""
        for occupant in self.grid.flat:
            if occupant is not None:
                occupant.location = None
        self.grid.fill(None)

    def clear(self, location):
        """Removes whatever is at the location, if anything."""
        self.grid[location.row, location.col] = None

    def place(self, occupant, location):
        """
        Records the occupant at the location. Whatever was there before is
        evicted, and the occupant's previous cell (if any) is cleared, so an
        occupant is relocated rather than duplicated.
        """
        previous = self.grid[location.row, location.col]
        if previous is not None and previous is not occupant:
            previous.location = None
        if occupant.location is not None and occupant.location != location:
            self.clear(occupant.location)
        self.grid[location.row, location.col] = occupant
        occupant.location = location

    def get_occupant(self, location):
        return self.grid[location.row, location.col]

    def is_in_bounds(self, row, col):
        return 0 <= row < self.depth and 0 <= col < self.width

    def adjacent_locations(self, location):
        """
        Returns the in-bounds cells at distance 1 from the location, in shuffled order.
        Edge cells have 5 neighbours and corner cells 3.
        """
        locations = []
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            row = location.row + d_row
            col = location.col + d_col
            if self.is_in_bounds(row, col):
                locations.append(Location(row, col))
        self.rng.shuffle(locations)
        return locations

    def get_free_adjacent_locations(self, location):
        """Returns the unoccupied neighbours of the location, in shuffled order."""
        return [where for where in self.adjacent_locations(location)
                if self.grid[where.row, where.col] is None]

    def free_adjacent_location(self, location):
        """Returns one unoccupied neighbour chosen at random, or None if all are taken."""
        free = self.get_free_adjacent_locations(location)
        if free:
            return free[0]
        return None

    def occupants(self):
        """Yields every occupant in row-major order."""
        for occupant in self.grid.flat:
            if occupant is not None:
                yield occupant
