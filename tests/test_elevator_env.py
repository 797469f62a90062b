import gymnasium as gym
import numpy as np
from gymnasium.utils.env_checker import check_env

from elevator_controller import ENV_ID
from elevator_controller.ElevatorEnv import ElevatorEnv
from tests.helpers import DOOR_TIMER, N_FLOORS


def press(kind, floor, num_floors=N_FLOORS):
    action = np.zeros((3, num_floors), dtype=np.int8)
    action[("cabin", "up", "down").index(kind), floor] = 1
    return action


class TestElevatorEnv:

    def test_passes_env_checker(self):
        check_env(ElevatorEnv(num_floors=N_FLOORS, door_timer=DOOR_TIMER))

    def test_reset_observation(self):
        env = ElevatorEnv(num_floors=N_FLOORS, door_timer=DOOR_TIMER)
        obs, info = env.reset(seed=0)
        assert obs.tolist() == [0, 0, 0, 0, 1, 0, 0, 0, 0]
        assert info["mode"] == "idle"
        assert env.observation_space.contains(obs)

    def test_step_is_one_tick(self):
        env = ElevatorEnv(num_floors=N_FLOORS, door_timer=DOOR_TIMER)
        env.reset(seed=0)
        obs, reward, terminated, truncated, info = env.step(press("cabin", 2))
        assert obs[1] == 1  # motor_up
        assert obs[5 + 2] == 1
        assert reward == -env.pending_penalty
        assert not terminated and not truncated
        assert info["outputs"].motor_up

        env.step(np.zeros((3, N_FLOORS), dtype=np.int8))
        obs, reward, _, _, info = env.step(np.zeros((3, N_FLOORS), dtype=np.int8))
        assert obs[0] == 2 and obs[3] == 1
        assert info["served"] == 1
        assert reward == 0

    def test_reset_clears_pending_requests(self):
        env = ElevatorEnv(num_floors=N_FLOORS, door_timer=DOOR_TIMER)
        env.reset(seed=0)
        env.step(press("down", 3))
        env.step(press("up", 0))
        obs, _ = env.reset()
        assert not obs[5:].any()
        assert env.last_logs

    def test_truncates_after_max_steps(self, capsys):
        env = ElevatorEnv(
            num_floors=N_FLOORS, door_timer=DOOR_TIMER, max_episode_steps=5
        )
        env.reset(seed=0)
        results = [env.step(env.action_space.sample()) for _ in range(5)]
        assert [r[3] for r in results] == [False] * 4 + [True]
        assert "Total_reward" in capsys.readouterr().out

    def test_info_counts_requests_served(self):
        env = ElevatorEnv(num_floors=N_FLOORS, door_timer=DOOR_TIMER)
        env.reset(seed=0)
        _, _, _, _, info = env.step(press("cabin", 0))
        assert info["served"] == 1
        _, _, _, _, info = env.step(np.zeros((3, N_FLOORS), dtype=np.int8))
        assert info["served"] == 0

    def test_logs_live_on_the_controller(self):
        env = ElevatorEnv(num_floors=N_FLOORS, door_timer=DOOR_TIMER)
        env.reset(seed=0)
        env.step(press("up", 1))
        assert not hasattr(env, "logs")
        assert env.controller.logs[-1]["event"] == "transition"

    def test_registered_with_gymnasium(self):
        env = gym.make(ENV_ID, num_floors=N_FLOORS, door_timer=DOOR_TIMER)
        obs, _ = env.reset(seed=0)
        assert env.spec.id == ENV_ID
        assert env.unwrapped.num_floors == N_FLOORS
        assert env.observation_space.contains(obs)
        env.close()
