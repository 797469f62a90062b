from dataclasses import dataclass
from enum import Enum
from typing import Optional

from elevator_controller import config as cfg
from elevator_controller.DoorTimer import DoorTimer
from elevator_controller.ElevatorException import ElevatorInvariantError
from elevator_controller.MotionModel import MotionModel
from elevator_controller.RequestLatch import RequestLatch


class Mode(Enum):
    IDLE = "idle"
    MOVING_UP = "moving_up"
    MOVING_DOWN = "moving_down"
    DOOR_OPEN = "door_open"


class Direction(Enum):
    UP = 1
    DOWN = -1


@dataclass(frozen=True)
class Outputs:
    current_floor: int
    motor_up: bool
    motor_down: bool
    door_open: bool
    direction: Direction


@dataclass(frozen=True)
class Decision:
    next_mode: Mode
    move: int = 0  # 1 = one floor up, -1 = one floor down, 0 = stay
    serve: bool = False  # clear the request of the floor the car ends up on
    open_door: bool = False  # restart the dwell counter
    direction: Optional[Direction] = None  # None keeps the current direction


class Scheduler:
    """
    Single-car controller, advanced one tick at a time.

    Each tick runs in a fixed order:
      1) merge the stimuli into the request latch
      2) decide the next mode from floor, latch and current mode
      3) apply the decision (move, clear the served request, switch mode)
      4) advance the door timer if the door is open
    Outputs are a pure function of the state after the tick.
    """

    def __init__(self, n_floors: int = cfg.N_FLOORS, door_timer: int = cfg.DOOR_TIMER):
        self.n_floors = n_floors
        self.door_timer = door_timer
        self.requests = RequestLatch(n_floors)
        self.motion = MotionModel(n_floors)
        self.timer = DoorTimer(door_timer)
        self.mode = Mode.IDLE
        self.direction = Direction.UP
        self.ticks = 0
        self.last_served = []  # floors cleared during the most recent tick
        self.logs = []

    @property
    def current_floor(self) -> int:
        return self.motion.current_floor

    def log(self, event, floor=None, **extra):
        """Writes a log entry."""
        entry = {
            "tick": self.ticks,
            "event": event,  # 'latched', 'served', 'transition' or 'reset'
            "floor": self.current_floor if floor is None else floor,
            "mode": self.mode.value,
        }
        entry.update(extra)
        self.logs.append(entry)

    def reset(self):
        self.requests.reset()
        self.motion.reset()
        self.timer.reset()
        self.mode = Mode.IDLE
        self.direction = Direction.UP
        self.last_served = []
        self.log("reset")

    def tick(
        self, cabin_requests=None, up_calls=None, down_calls=None, reset=False
    ) -> Outputs:
        self.ticks += 1
        # Reset overrides everything sampled in the same tick
        if reset:
            self.reset()
            return self.outputs()

        for floor in self.requests.merge(cabin_requests, up_calls, down_calls):
            self.log("latched", floor)

        self.apply(self.decide())
        return self.outputs()

    # --- decision ---

    def decide(self) -> Decision:
        """Next mode and effects for this tick. Reads state, changes nothing."""
        floor = self.motion.current_floor
        if self.mode is Mode.IDLE:
            return self._decide_idle(floor)
        elif self.mode is Mode.MOVING_UP:
            return self._decide_moving(Direction.UP)
        elif self.mode is Mode.MOVING_DOWN:
            return self._decide_moving(Direction.DOWN)
        elif self.mode is Mode.DOOR_OPEN:
            return self._decide_door_open(floor)
        raise ElevatorInvariantError(f"Unhandled mode {self.mode!r}")

    def _decide_idle(self, floor):
        if not self.requests.any():
            return Decision(Mode.IDLE)
        if self.requests.has_request(floor):
            return Decision(Mode.DOOR_OPEN, serve=True, open_door=True)
        # Up is checked first on a tie
        if self.requests.any_above(floor):
            return Decision(Mode.MOVING_UP, direction=Direction.UP)
        if self.requests.any_below(floor):
            return Decision(Mode.MOVING_DOWN, direction=Direction.DOWN)
        raise ElevatorInvariantError(
            f"Pending requests but none at, above or below floor {floor}"
        )

    def _decide_moving(self, direction):
        if direction is Direction.UP:
            mode, reverse_mode = Mode.MOVING_UP, Mode.MOVING_DOWN
            ahead, behind = self.requests.any_above, self.requests.any_below
        else:
            mode, reverse_mode = Mode.MOVING_DOWN, Mode.MOVING_UP
            ahead, behind = self.requests.any_below, self.requests.any_above
        reverse = Direction(-direction.value)

        step = direction.value
        target = self.motion.peek(step)
        if self.requests.has_request(target):
            return Decision(
                Mode.DOOR_OPEN,
                move=step,
                serve=True,
                open_door=True,
                direction=direction,
            )
        if ahead(target):
            return Decision(mode, move=step, direction=direction)
        if behind(target):
            # Reverse without stopping
            return Decision(reverse_mode, move=step, direction=reverse)
        return Decision(Mode.IDLE, move=step)

    def _decide_door_open(self, floor):
        if not self.timer.expired():
            # Clear again on every tick the door stays open
            return Decision(Mode.DOOR_OPEN, serve=True)
        if self.requests.any_above(floor):
            return Decision(Mode.MOVING_UP, direction=Direction.UP)
        if self.requests.any_below(floor):
            return Decision(Mode.MOVING_DOWN, direction=Direction.DOWN)
        return Decision(Mode.IDLE)

    # --- effects ---

    def apply(self, decision: Decision):
        previous = self.mode
        self.last_served = []

        if decision.move:
            floor = self.motion.step(decision.move)
        else:
            floor = self.motion.current_floor

        if decision.serve and self.requests.clear(floor):
            self.last_served.append(floor)

        if decision.direction is not None:
            self.direction = decision.direction
        self.mode = decision.next_mode

        if decision.open_door:
            self.timer.open()
        elif self.mode is not Mode.DOOR_OPEN:
            self.timer.reset()
        if self.mode is Mode.DOOR_OPEN:
            self.timer.tick()

        for served in self.last_served:
            self.log("served", served)
        if previous is not self.mode:
            self.log("transition", previous=previous.value)

    # --- observation ---

    def outputs(self) -> Outputs:
        return Outputs(
            current_floor=self.motion.current_floor,
            motor_up=self.mode is Mode.MOVING_UP,
            motor_down=self.mode is Mode.MOVING_DOWN,
            door_open=self.mode is Mode.DOOR_OPEN,
            direction=self.direction,
        )

    def pending(self):
        return self.requests.pending()
