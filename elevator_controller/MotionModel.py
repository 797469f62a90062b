from elevator_controller import config as cfg
from elevator_controller.ElevatorException import ElevatorInvariantError


class MotionModel:
    """
    Floor counter of the car. One tick moves at most one floor.
    Steps past the top or bottom floor saturate at the bound.
    """

    def __init__(self, n_floors: int = cfg.N_FLOORS):
        if n_floors < 1:
            raise ValueError(f"n_floors must be at least 1, got {n_floors}")
        self.min_floor = 0
        self.max_floor = n_floors - 1
        self.current_floor = self.min_floor

    def peek(self, direction: int) -> int:
        """Floor the car would be on after `step(direction)`."""
        # direction: 1 = up, -1 = down
        next_floor = self.current_floor + direction
        return min(max(next_floor, self.min_floor), self.max_floor)

    def step(self, direction: int) -> int:
        self.current_floor = self.peek(direction)
        self.check_bounds()
        return self.current_floor

    def check_bounds(self):
        if not self.min_floor <= self.current_floor <= self.max_floor:
            raise ElevatorInvariantError(
                f"Floor {self.current_floor} outside "
                f"[{self.min_floor}, {self.max_floor}]"
            )

    def reset(self):
        self.current_floor = self.min_floor
