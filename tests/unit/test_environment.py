"""
Unit tests for the Gymnasium environment and text rendering.
"""
import numpy as np
import pytest
from minefield import (
    GameConfig,
    GameMachine,
    GameState,
    MineSchedule,
    MinesweeperEnv,
    RevealCell,
    render_ansi,
)

MINES = (2, 12, 20, 24)


@pytest.fixture
def env() -> MinesweeperEnv:
    """Seeded 5x5 environment with 4 mines."""
    environment = MinesweeperEnv(GameConfig(5, 4), render_mode="ansi")
    environment.reset(seed=0)
    return environment


@pytest.fixture
def scenario_env(env: MinesweeperEnv) -> MinesweeperEnv:
    """Environment whose machine uses the fixed scenario schedule."""
    env.machine = GameMachine(env.config, schedule=MineSchedule([0, 8, 16, 20]))
    return env


# ============================================================================
# Space Tests
# ============================================================================

class TestSpaces:
    """Test observation and action spaces."""

    def test_reset_returns_concealed_observation(self, env: MinesweeperEnv) -> None:
        """Reset starts a concealed game."""
        obs, info = env.reset(seed=1)
        assert obs.shape == (5, 5)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert info["game_state"] == "IDLE"
        assert env.observation_space.contains(obs)

    def test_action_space_covers_reveal_and_flag(self, env: MinesweeperEnv) -> None:
        """One reveal and one flag action per cell."""
        assert env.action_space.n == 50

    def test_idle_mask_only_offers_reveals(self, env: MinesweeperEnv) -> None:
        """Flags do nothing before the first reveal."""
        mask = env.get_action_mask()
        assert mask[:25].all()
        assert not mask[25:].any()

    def test_same_seed_same_game(self) -> None:
        """Seeded resets reproduce the minefield."""
        first = MinesweeperEnv(GameConfig(9, 10))
        second = MinesweeperEnv(GameConfig(9, 10))
        first.reset(seed=3)
        second.reset(seed=3)
        obs_a, *_ = first.step(40)
        obs_b, *_ = second.step(40)
        assert np.array_equal(obs_a, obs_b)


# ============================================================================
# Step Tests
# ============================================================================

class TestStep:
    """Test rewards and termination."""

    def test_safe_reveal_reward(self, scenario_env: MinesweeperEnv) -> None:
        """Revealing a safe cell pays +1."""
        obs, reward, terminated, truncated, info = scenario_env.step(0)
        assert reward == 1.0
        assert not terminated and not truncated
        assert info["game_state"] == "PLAYING"
        assert info["revealed"] == 8
        assert obs[0, 0] == 0

    def test_noop_penalty(self, scenario_env: MinesweeperEnv) -> None:
        """Repeating a reveal changes nothing and is penalised."""
        scenario_env.step(0)
        _, reward, terminated, _, _ = scenario_env.step(0)
        assert reward == pytest.approx(-0.1)
        assert not terminated

    def test_flag_during_idle_is_noop(self, scenario_env: MinesweeperEnv) -> None:
        """Flag actions before the first reveal are ignored."""
        _, reward, _, _, info = scenario_env.step(25 + 3)
        assert reward == pytest.approx(-0.1)
        assert info["flagged"] == 0

    def test_flag_reward(self, scenario_env: MinesweeperEnv) -> None:
        """Toggling a flag is neutral."""
        scenario_env.step(0)
        obs, reward, _, _, info = scenario_env.step(25 + 20)
        assert reward == 0.0
        assert obs[4, 0] == -2
        assert info["flagged"] == 1

    def test_mine_loses(self, scenario_env: MinesweeperEnv) -> None:
        """Revealing a mine pays -10 and ends the episode."""
        scenario_env.step(0)
        obs, reward, terminated, _, info = scenario_env.step(20)
        assert reward == -10.0
        assert terminated
        assert info["game_state"] == "LOST"
        assert obs[4, 0] == 9
        assert not scenario_env.get_action_mask().any()

    def test_finishing_the_board_wins(self, scenario_env: MinesweeperEnv) -> None:
        """The environment checks for a win after every action."""
        actions = [i for i in range(25) if i not in MINES]
        actions += [25 + i for i in MINES]
        rewards = []
        terminated = False
        for action in actions:
            _, reward, terminated, _, info = scenario_env.step(action)
            rewards.append(reward)
            if terminated:
                break
        assert terminated
        assert rewards[-1] == 10.0
        assert info["game_state"] == "WON"
        assert scenario_env.machine.state == GameState.WON


# ============================================================================
# Rendering Tests
# ============================================================================

class TestRender:
    """Test ANSI rendering."""

    def test_concealed_board(self) -> None:
        """Concealed cells draw as dots."""
        machine = GameMachine(GameConfig(3, 0))
        assert render_ansi(machine.snapshot()) == "\n".join([". . . "] * 3)

    def test_scenario_after_first_click(self) -> None:
        """Counts, blanks and concealed cells after the first reveal."""
        machine = GameMachine(GameConfig(5, 4), schedule=MineSchedule([0, 8, 16, 20]))
        _, snapshot = machine.dispatch(RevealCell(0))
        lines = render_ansi(snapshot).split("\n")
        assert lines[0] == "  1 . . . "
        assert lines[1] == "  2 . . . "
        assert render_ansi(snapshot, show_mines=True).split("\n")[0] == "  1 * . . "

    def test_env_render(self, scenario_env: MinesweeperEnv) -> None:
        """ANSI render mode returns the text."""
        scenario_env.step(0)
        text = scenario_env.render()
        assert text.split("\n")[2] == "  1 . . . "
