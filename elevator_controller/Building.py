import simpy

from elevator_controller import config as cfg
from elevator_controller.CallGenerator import CallGenerator
from elevator_controller.Scheduler import Scheduler


class Building:
    """
    SimPy harness around one controller: every time unit of the
    environment is one controller tick.
    """

    def __init__(
        self,
        env=None,
        num_floors=cfg.N_FLOORS,
        door_timer=cfg.DOOR_TIMER,
        max_ticks=cfg.SIM_TICKS,
        call_generator=None,
        reset_ticks=(),
        verbose=False,
    ):
        # 1) Normal SimPy environment, not real-time
        self.env = env or simpy.Environment()
        # 2) Parameters
        self.num_floors = num_floors
        self.door_timer = door_timer
        self.max_ticks = max_ticks
        self.reset_ticks = set(reset_ticks)
        self.verbose = verbose
        # 3) Controller & call source
        self.controller = Scheduler(n_floors=num_floors, door_timer=door_timer)
        self.calls = call_generator or CallGenerator(n_floors=num_floors)
        # 4) Helper structures
        self.trace = []
        self.episode_steps = 0
        self.stop_event = self.env.event()
        # 5) Start processes
        self.env.process(self.step())

    @property
    def logs(self):
        return self.controller.logs

    def record(self, outputs):
        """Writes one trace row with the outputs observed after a tick."""
        self.trace.append(
            {
                "tick": self.episode_steps,
                "time": self.env.now,
                "floor": outputs.current_floor,
                "motor_up": outputs.motor_up,
                "motor_down": outputs.motor_down,
                "door_open": outputs.door_open,
                "direction": outputs.direction.name,
                "mode": self.controller.mode.value,
                "pending": int(self.controller.pending().sum()),
            }
        )

    def step(self):
        while True:
            if self.episode_steps >= self.max_ticks:
                self.stop_event.succeed()
                break
            self.episode_steps += 1
            cabin, up, down = self.calls.next_stimulus()
            previous_mode = self.controller.mode
            outputs = self.controller.tick(
                cabin_requests=cabin,
                up_calls=up,
                down_calls=down,
                reset=self.episode_steps in self.reset_ticks,
            )
            self.record(outputs)
            if self.verbose and self.controller.mode is not previous_mode:
                print(
                    f"{self.env.now}: {previous_mode.value} -> "
                    f"{self.controller.mode.value} at floor {outputs.current_floor}"
                )
            yield self.env.timeout(1)

    def run(self):
        self.env.run(until=self.stop_event)
        return self.trace
