#time_manager.py

import constants as C

class TimeManager:
    def __init__(self):
        self.step = 0 # Number of completed simulation steps
        self.is_paused = False
        self.speed_level = C.DEFAULT_SPEED_LEVEL
        self.steps_per_second = C.STEPS_PER_SECOND[self.speed_level]

    def is_night(self):
        """Night is every fourth step, first occurring on the fourth step."""
        return self.step % C.NIGHT_CYCLE_LENGTH == C.NIGHT_PHASE_INDEX

    def advance(self):
        self.step += 1

    def reset(self):
        self.step = 0

    def get_step_interval_seconds(self):
        """Returns how much real time should pass between steps, or None while paused."""
        if self.is_paused:
            return None
        return 1.0 / self.steps_per_second

    def toggle_pause(self):
        self.is_paused = not self.is_paused
        print(f"Event: Simulation {'paused' if self.is_paused else 'resumed'}.")

    def set_speed(self, level):
        if level in C.STEPS_PER_SECOND:
            self.speed_level = level
            self.steps_per_second = C.STEPS_PER_SECOND[level]
            print(f"Event: Simulation speed set to level {level} ({self.steps_per_second} steps/sec).")

    def get_display_string(self, weather):
        """Time of day and weather for the next step to be executed."""
        day_night = "Time: night" if self.is_night() else "Time: day"
        return f"{day_night}   Weather: {weather.value}"
