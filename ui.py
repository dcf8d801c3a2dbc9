#ui.py

import pygame
import numpy as np
import constants as C
from species import Species
from view import population_counts, is_field_viable, format_population

# Species colours as a lookup, built once.
SPECIES_COLOR_LOOKUP = {species: C.SPECIES_COLORS[species.value] for species in Species}

def field_to_color_array(field):
    """Builds a (width, depth, 3) uint8 array of cell colours, the layout pygame.surfarray expects."""
    colors = np.empty((field.depth, field.width, 3), dtype=np.uint8)
    colors[:, :] = C.COLOR_EMPTY
    for occupant in field.occupants():
        colors[occupant.location.row, occupant.location.col] = SPECIES_COLOR_LOOKUP[occupant.species]
    return np.transpose(colors, (1, 0, 2))

class GridView:
    """Draws the field as a grid of coloured cells above a status bar."""
    def __init__(self, screen, font):
        self.screen = screen
        self.font = font
        self.info_text = ""
        self.closed = False
        self.grid_rect = pygame.Rect(0, C.UI_STATUS_BAR_HEIGHT, C.SCREEN_WIDTH, C.SCREEN_HEIGHT - C.UI_STATUS_BAR_HEIGHT)

    def set_info_text(self, text):
        self.info_text = text

    def is_viable(self, field):
        if self.closed:
            return False
        return is_field_viable(field)

    def show_status(self, step, field):
        # Keep the window responsive while the simulation is driven from outside.
        for event in pygame.event.get(pygame.QUIT):
            self.closed = True

        self.screen.fill(C.COLOR_STATUS_BAR)
        surface = pygame.surfarray.make_surface(field_to_color_array(field))
        self.screen.blit(pygame.transform.scale(surface, self.grid_rect.size), self.grid_rect.topleft)

        counts = population_counts(field)
        lines = [f"Step: {step}   {self.info_text}", f"Population: {format_population(counts)}"]
        for i, line in enumerate(lines):
            text_surface = self.font.render(line, True, C.COLOR_WHITE)
            self.screen.blit(text_surface, (C.UI_TEXT_POS_X, C.UI_TEXT_POS_X + i * C.UI_LINE_SPACING))

        pygame.display.flip()
