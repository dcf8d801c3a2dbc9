# logger.py

# The running world's TimeManager, once there is one.
_time_manager = None

def set_time_manager(tm):
    global _time_manager
    _time_manager = tm

def log(message):
    """Prints the message behind a step stamp such as `[Step 00042 day]`."""
    if _time_manager is None or _time_manager.step == 0:
        print(f"[Sim Start] {message}")
        return
    phase = "night" if _time_manager.is_night() else "day"
    print(f"[Step {_time_manager.step:05d} {phase}] {message}")
