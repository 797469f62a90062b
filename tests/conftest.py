import pytest

from elevator_controller.Scheduler import Scheduler
from tests.helpers import DOOR_TIMER, N_FLOORS


@pytest.fixture
def controller():
    return Scheduler(n_floors=N_FLOORS, door_timer=DOOR_TIMER)
