#main.py

import pygame
import cProfile
import pstats
import constants as C
from world import World
from ui import GridView
import logger

def initialize_simulation():
    pygame.init()
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption("Grid Ecosystem Simulation")
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log(f"Opened a {C.SCREEN_WIDTH}x{C.SCREEN_HEIGHT} window.")
    return screen, font

def run_simulation():
    screen, font = initialize_simulation()
    clock = pygame.time.Clock()
    view = GridView(screen, font)
    world = World(view=view)
    logger.set_time_manager(world.time_manager)
    time_manager = world.time_manager

    logger.log("Starting main simulation loop...")
    logger.log("CONTROLS: [SPACE] to Pause, [0-5] to set Speed, [R] to Reset.")

    seconds_since_step = 0.0
    running = True
    while running and world.step < C.LONG_RUN_STEPS:
        real_delta_seconds = clock.tick(C.CLOCK_TICK_RATE) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE: time_manager.toggle_pause()
                if event.key == pygame.K_r: world.reset()
                if event.key == pygame.K_0: time_manager.set_speed(0)
                if event.key == pygame.K_1: time_manager.set_speed(1)
                if event.key == pygame.K_2: time_manager.set_speed(2)
                if event.key == pygame.K_3: time_manager.set_speed(3)
                if event.key == pygame.K_4: time_manager.set_speed(4)
                if event.key == pygame.K_5: time_manager.set_speed(5)

        step_interval = time_manager.get_step_interval_seconds()
        if step_interval is None:
            continue

        seconds_since_step += real_delta_seconds
        if seconds_since_step >= step_interval:
            seconds_since_step = 0.0
            if world.simulate(1) == 0:
                running = False

    logger.log(f"Main simulation loop ended after {world.step} steps.")
    return world

def shutdown_simulation(world):
    logger.log(f"Closing the window at step {world.step}.")
    pygame.quit()

def main():
    logger.log("--- Grid Ecosystem ---")
    world = run_simulation()
    shutdown_simulation(world)

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        pass
    finally:
        # Slowest call paths of the run, by cumulative time.
        stats = pstats.Stats(profiler).sort_stats(pstats.SortKey.CUMULATIVE)
        print(f"\n--- Top {C.PROFILER_PRINT_LINE_COUNT} calls by cumulative time ---")
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
