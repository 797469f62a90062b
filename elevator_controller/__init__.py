import gymnasium as gym

from elevator_controller.Scheduler import Direction, Mode, Outputs, Scheduler

ENV_ID = "ElevatorController-v0"

gym.register(id=ENV_ID, entry_point="elevator_controller.ElevatorEnv:ElevatorEnv")

__all__ = ["ENV_ID", "Direction", "Mode", "Outputs", "Scheduler"]
