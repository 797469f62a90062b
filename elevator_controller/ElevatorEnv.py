import gymnasium as gym
from gymnasium import spaces
import numpy as np

from elevator_controller import config as cfg
from elevator_controller.Scheduler import Direction, Scheduler


class ElevatorEnv(gym.Env):
    """
    Gymnasium view of the controller. The agent plays the passengers:
    each action is the set of calls pressed during one tick.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        num_floors=cfg.N_FLOORS,
        door_timer=cfg.DOOR_TIMER,
        max_episode_steps=cfg.ENV_MAX_EPISODE_STEPS,
        pending_penalty=cfg.ENV_PENDING_PENALTY,
    ):
        super().__init__()
        self.num_floors = num_floors
        self.door_timer = door_timer
        self.max_episode_steps = max_episode_steps
        self.pending_penalty = pending_penalty
        # Rows: cabin requests, up calls, down calls
        self.action_space = spaces.MultiBinary((3, num_floors))
        self.observation_space = self.build_obs_space(num_floors)
        self.controller = Scheduler(n_floors=num_floors, door_timer=door_timer)
        self.last_logs = None
        self.episode_steps = 0
        self.total_reward = 0

    def build_obs_space(self, num_floors):
        # floor, motor_up, motor_down, door_open, direction_up, pending flags
        low = [0, 0, 0, 0, 0] + [0] * num_floors
        high = [num_floors - 1, 1, 1, 1, 1] + [1] * num_floors
        return spaces.Box(low=np.array(low), high=np.array(high), dtype=np.int32)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        if self.controller.logs:
            self.last_logs = self.controller.logs.copy()
        self.controller.logs = []
        outputs = self.controller.tick(reset=True)
        self.episode_steps = 0
        self.total_reward = 0
        return self._get_obs(), self._get_info(outputs)

    def step(self, action):
        action = np.asarray(action, dtype=bool).reshape(3, self.num_floors)
        self.episode_steps += 1
        outputs = self.controller.tick(
            cabin_requests=action[0], up_calls=action[1], down_calls=action[2]
        )
        pending = int(self.controller.pending().sum())
        reward = -self.pending_penalty * pending
        self.total_reward += reward
        terminated = False
        truncated = self.episode_steps >= self.max_episode_steps
        if truncated:
            print("Step: ", self.episode_steps)
            print("Requests_served: ", self.served_total())
            print("Total_reward: ", self.total_reward)
        return self._get_obs(), reward, terminated, truncated, self._get_info(outputs)

    def served_total(self):
        return sum(1 for entry in self.controller.logs if entry["event"] == "served")

    def _get_obs(self):
        outputs = self.controller.outputs()
        obs = [
            outputs.current_floor,
            int(outputs.motor_up),
            int(outputs.motor_down),
            int(outputs.door_open),
            int(outputs.direction is Direction.UP),
        ]
        obs.extend(int(flag) for flag in self.controller.pending())
        return np.array(obs, dtype=np.int32)

    def _get_info(self, outputs):
        return {
            "outputs": outputs,
            "mode": self.controller.mode.value,
            "served": len(self.controller.last_served),
        }
