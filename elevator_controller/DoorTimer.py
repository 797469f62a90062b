from elevator_controller import config as cfg


class DoorTimer:
    def __init__(self, door_timer: int = cfg.DOOR_TIMER):
        if door_timer < 1:
            raise ValueError(f"door_timer must be at least 1, got {door_timer}")
        self.door_timer = door_timer
        self.count = 0  # ticks since the door opened
        self.active = False

    def open(self):
        self.count = 0
        self.active = True

    def tick(self):
        if self.active:
            self.count += 1

    def expired(self, threshold=None) -> bool:
        threshold = self.door_timer if threshold is None else threshold
        return self.count >= threshold

    def reset(self):
        self.count = 0
        self.active = False
