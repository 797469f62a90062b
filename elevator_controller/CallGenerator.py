import numpy as np

from elevator_controller import config as cfg

CABIN, UP, DOWN = "cabin", "up", "down"
CALL_KINDS = (CABIN, UP, DOWN)


class CallGenerator:
    """
    Synthetic call source for driving a controller.

    Random calls arrive as a Poisson process (exponential gaps with mean
    `call_interval` ticks). A scripted schedule {tick: [(kind, floor), ...]}
    can be given on top of, or instead of, the random calls.
    """

    def __init__(
        self,
        n_floors: int = cfg.N_FLOORS,
        call_interval: float = cfg.SIM_CALL_INTERVAL,
        cabin_share: float = cfg.SIM_CABIN_SHARE,
        seed=cfg.SIM_RANDOM_SEED,
        schedule=None,
        random_calls: bool = True,
    ):
        self.n_floors = n_floors
        self.call_interval = call_interval
        self.cabin_share = cabin_share
        self.schedule = schedule or {}
        self.random_calls = random_calls
        self.rng = np.random.default_rng(seed)
        self.tick = 0
        self.generated = []  # (tick, kind, floor) for every call handed out
        # For Poisson spawning:
        self._time_since_last_call = 0.0
        self.time_until_next_call = self.rng.exponential(self.call_interval)

    def _random_call(self):
        floor = int(self.rng.integers(self.n_floors))
        if self.rng.random() < self.cabin_share:
            return CABIN, floor
        # Hall calls are not filtered at the terminal floors
        return (UP if self.rng.random() < 0.5 else DOWN), floor

    def calls_for_tick(self):
        calls = list(self.schedule.get(self.tick, []))
        if self.random_calls:
            self._time_since_last_call += 1
            while self._time_since_last_call >= self.time_until_next_call:
                calls.append(self._random_call())
                self._time_since_last_call -= self.time_until_next_call
                self.time_until_next_call = self.rng.exponential(self.call_interval)
        return calls

    def next_stimulus(self):
        """
        Returns (cabin_requests, up_calls, down_calls) for the coming tick.
        """
        self.tick += 1
        vectors = {kind: np.zeros(self.n_floors, dtype=bool) for kind in CALL_KINDS}
        for kind, floor in self.calls_for_tick():
            if kind not in vectors:
                raise ValueError(f"Unknown call kind {kind!r}")
            if not 0 <= floor < self.n_floors:
                raise ValueError(f"Call at floor {floor} outside the building")
            vectors[kind][floor] = True
            self.generated.append((self.tick, kind, floor))
        return vectors[CABIN], vectors[UP], vectors[DOWN]
