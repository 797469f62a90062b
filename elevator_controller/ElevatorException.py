class ElevatorInvariantError(AssertionError):
    """
    Raised when the controller reaches a state that the request latch
    and the floor bounds make unreachable. Always a defect, never input.
    """
