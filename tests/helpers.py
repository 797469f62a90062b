import numpy as np

from elevator_controller import config as cfg
from elevator_controller.Scheduler import Mode

N_FLOORS = cfg.N_FLOORS
DOOR_TIMER = cfg.TEST_DOOR_TIMER


def floors(*indices, n_floors=N_FLOORS):
    """Floor-indexed bool vector with the given floors set."""
    vec = np.zeros(n_floors, dtype=bool)
    vec[list(indices)] = True
    return vec


def run_idle(controller, ticks):
    """Tick without stimuli, return the outputs observed after each tick."""
    return [controller.tick() for _ in range(ticks)]


def park_at(controller, floor, limit=500):
    """Send the car to `floor` and wait until it is idle there."""
    controller.tick(cabin_requests=floors(floor, n_floors=controller.n_floors))
    for _ in range(limit):
        if controller.mode is Mode.IDLE and controller.current_floor == floor:
            return
        controller.tick()
    raise AssertionError(f"Car did not park at floor {floor}")


def served_floors(controller):
    return [entry["floor"] for entry in controller.logs if entry["event"] == "served"]
