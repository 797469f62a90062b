import numpy as np

from elevator_controller import config as cfg


class RequestLatch:
    """
    Pending-request memory: one flag per floor.

    Cabin requests, up calls and down calls are OR-ed into the same flag,
    so once latched a request no longer remembers where it came from.
    A flag is only ever cleared by `clear` when its floor is served.
    """

    def __init__(self, n_floors: int = cfg.N_FLOORS):
        if n_floors < 1:
            raise ValueError(f"n_floors must be at least 1, got {n_floors}")
        self.n_floors = n_floors
        self._flags = np.zeros(n_floors, dtype=bool)

    def _as_vector(self, calls):
        if calls is None:
            return np.zeros(self.n_floors, dtype=bool)
        vec = np.asarray(calls, dtype=bool)
        if vec.shape != (self.n_floors,):
            raise ValueError(
                f"Expected {self.n_floors} floor flags, got shape {vec.shape}"
            )
        return vec

    def merge(self, cabin_requests=None, up_calls=None, down_calls=None):
        """
        OR the three stimulus vectors into the latch.
        Returns the floors whose flag went from unset to set.
        """
        incoming = (
            self._as_vector(cabin_requests)
            | self._as_vector(up_calls)
            | self._as_vector(down_calls)
        )
        newly_set = incoming & ~self._flags
        self._flags |= incoming
        return [int(f) for f in np.flatnonzero(newly_set)]

    def clear(self, floor: int) -> bool:
        """Unset one flag. Returns True if it was set."""
        was_set = bool(self._flags[floor])
        self._flags[floor] = False
        return was_set

    def has_request(self, floor: int) -> bool:
        return bool(self._flags[floor])

    def any_above(self, floor: int) -> bool:
        return bool(self._flags[floor + 1 :].any())

    def any_below(self, floor: int) -> bool:
        return bool(self._flags[:floor].any())

    def any(self) -> bool:
        return bool(self._flags.any())

    def pending(self):
        """Copy of the flags, for observation only."""
        return self._flags.copy()

    def reset(self):
        self._flags[:] = False
