"""
Tests for main.py - the simulation loop and headless runner.
"""

import random
from unittest.mock import patch

import pytest

from snake_arcade.config import GameConfig
from snake_arcade.domain import (
    UP, LEFT, RIGHT,
    MOVE_UP, MOVE_LEFT, RESTART,
    Position,
    PowerKind,
    PowerType,
    Snake,
    spawn,
)
from snake_arcade.domain.power_ups import ActivePowerUp
from snake_arcade.main import SnakeGame, build_config, main, run_headless
from snake_arcade.players import Player, RandomPlayer

TICK = 0.05


def make_game(snake_positions=((5, 5),), direction=RIGHT, food=((0, 9),)):
    """A 10x10 game with a known snake and food layout."""
    game = SnakeGame(10, 10, tick_interval=TICK, rng=random.Random(0), clock=lambda: 0.0)
    game.snake = Snake(list(snake_positions), 10, 10, direction=direction)
    game.food = [spawn(Position(*pos)) for pos in food]
    return game


# Head at (5, 5) heading right; turning UP lands on the body at (5, 4)
COILED = [(5, 5), (4, 5), (4, 4), (5, 4), (6, 4)]


class TestUpdateGate:
    """Tests for the fixed-timestep gate."""

    def test_no_tick_before_interval(self):
        """update() is a no-op until a full interval has passed."""
        game = make_game()
        assert game.update(TICK / 2) is False
        assert game.tick_number == 0
        assert game.snake.head == (5, 5)

    def test_tick_after_interval(self):
        """update() runs a tick once the interval has elapsed."""
        game = make_game()
        assert game.update(TICK) is True
        assert game.tick_number == 1
        assert game.snake.head == (6, 5)
        assert game.last_update == TICK

    def test_missed_ticks_not_accumulated(self):
        """A long gap still produces a single tick."""
        game = make_game()
        assert game.update(10 * TICK) is True
        assert game.update(10 * TICK) is False
        assert game.tick_number == 1

    def test_update_uses_clock_by_default(self):
        """Without an explicit time, update() reads the game clock."""
        now = [0.0]
        game = SnakeGame(10, 10, tick_interval=TICK, rng=random.Random(0), clock=lambda: now[0])
        now[0] = TICK
        assert game.update() is True

    def test_dead_snake_freezes_game(self):
        """While dead, no movement, spawning or power-up processing happens."""
        game = make_game(food=())
        game.power_ups = [ActivePowerUp(PowerKind.invulnerability(), activated_at=0.0)]
        game.snake.kill()
        assert game.update(1.0) is False
        assert game.snake.head == (5, 5)
        assert game.food == []
        assert game.snake.alive is False


class TestTick:
    """Tests for a single simulation tick."""

    def test_food_pickup_scores_and_grows(self):
        """Eating food scores 1 and grows the snake from its old tail."""
        game = make_game(food=((5, 5),))
        game.tick(1.0)
        assert game.score == 1
        assert list(game.snake.positions) == [(6, 5), (5, 5)]
        assert game.scored is False

    def test_body_does_not_eat(self):
        """Food under a body segment stays on the board."""
        game = make_game(snake_positions=[(5, 5), (4, 5)], food=((4, 5),))
        food = game.food[0]
        game.tick(1.0)
        assert game.score == 0
        assert game.food == [food]

    def test_food_respawned_same_tick(self):
        """Exactly one new food exists once the last one is eaten."""
        game = make_game(food=((5, 5),))
        eaten = game.food[0]
        game.tick(1.0)
        assert len(game.food) == 1
        assert game.food[0] is not eaten

    def test_no_respawn_while_food_remains(self):
        """Food is only spawned when the board is empty."""
        game = make_game(food=((0, 9),))
        game.tick(1.0)
        assert len(game.food) == 1
        assert game.food[0].position == (0, 9)

    def test_overlapping_food_eaten_together(self):
        """Two items under the head are both eaten but growth is one per tick."""
        game = make_game(food=((5, 5), (5, 5)))
        game.tick(1.0)
        assert game.score == 2
        assert len(game.snake) == 2
        game.tick(2.0)
        assert len(game.snake) == 3

    def test_power_food_activates(self):
        """Eating power food adds an active power-up stamped with the tick time."""
        game = make_game(food=())
        game.food = [spawn((5, 5), PowerKind.invulnerability())]
        game.tick(42.0)
        assert len(game.power_ups) == 1
        assert game.power_ups[0].kind.type is PowerType.INVULNERABILITY
        assert game.power_ups[0].activated_at == 42.0

    def test_activation_hook_called_at_pickup(self):
        """on_activation runs once for the eaten power-up."""
        game = make_game(food=())
        kind = PowerKind.score_multiplier(2)
        game.food = [spawn((5, 5), kind)]
        with patch("snake_arcade.domain.power_ups.on_activation") as on_activation:
            game.tick(1.0)
        on_activation.assert_called_once()
        assert on_activation.call_args[0][0] == kind

    def test_multiplier_from_prior_pickup(self):
        """Score 10 + pickup with an active x3 multiplier ends at 13, not 14."""
        game = make_game(food=((5, 5),))
        game.score = 10
        game.power_ups = [ActivePowerUp(PowerKind.score_multiplier(3), activated_at=0.5)]
        game.tick(1.0)
        assert game.score == 13

    def test_multiplier_applies_on_its_own_pickup(self):
        """The multiplier is active on the tick it is picked up."""
        game = make_game(food=())
        game.food = [spawn((5, 5), PowerKind.score_multiplier(4))]
        game.tick(1.0)
        assert game.score == 4

    def test_multiplier_idle_without_pickup(self):
        """An active multiplier leaves the score alone on ticks without food."""
        game = make_game()
        game.score = 7
        game.power_ups = [ActivePowerUp(PowerKind.score_multiplier(3), activated_at=0.5)]
        game.tick(1.0)
        assert game.score == 7

    def test_self_collision_ends_game(self):
        """Without invulnerability a self-collision is fatal and freezes the game."""
        game = make_game(snake_positions=COILED)
        game.handle_intent(MOVE_UP)
        game.tick(1.0)
        assert game.snake.alive is False
        assert game.update(2.0) is False

    def test_invulnerability_overrides_death(self):
        """An active invulnerability keeps the snake alive through a collision."""
        game = make_game(snake_positions=COILED)
        game.power_ups = [ActivePowerUp(PowerKind.invulnerability(), activated_at=0.5)]
        game.handle_intent(MOVE_UP)
        game.tick(1.0)
        assert game.snake.check_self_collision() is True
        assert game.snake.alive is True
        assert game.snake.death_reason is None
        assert game.snake.death_tick is None

    def test_invulnerability_pickup_saves_same_tick(self):
        """Power food is activated before the move, so it protects that very tick."""
        game = make_game(snake_positions=COILED, food=())
        game.food = [spawn((5, 5), PowerKind.invulnerability())]
        heads_at_activation = []
        game.handle_intent(MOVE_UP)
        with patch(
            "snake_arcade.domain.power_ups.on_activation",
            side_effect=lambda kind, ctx: heads_at_activation.append(game.snake.head),
        ):
            game.tick(1.0)
        assert heads_at_activation == [(5, 5)]
        assert game.snake.head == (5, 4)
        assert game.snake.check_self_collision() is True
        assert game.snake.alive is True
        assert len(game.power_ups) == 1


class TestExpiry:
    """Tests for power-up lifetimes inside the loop."""

    def test_multiplier_expires_after_30_seconds(self):
        """Present at T+29, gone at T+31."""
        game = make_game()
        game.power_ups = [ActivePowerUp(PowerKind.score_multiplier(2), activated_at=100.0)]
        game.tick(129.0)
        assert len(game.power_ups) == 1
        game.tick(131.0)
        assert game.power_ups == []

    def test_invulnerability_expires_after_20_seconds(self):
        """Present at T+19, gone at T+21."""
        game = make_game()
        game.power_ups = [ActivePowerUp(PowerKind.invulnerability(), activated_at=100.0)]
        game.tick(119.0)
        assert len(game.power_ups) == 1
        game.tick(121.0)
        assert game.power_ups == []

    def test_deactivation_hook_called_on_expiry(self):
        """on_deactivation runs once for each expired power-up."""
        game = make_game()
        kind = PowerKind.invulnerability()
        game.power_ups = [ActivePowerUp(kind, activated_at=0.0)]
        with patch("snake_arcade.domain.power_ups.on_deactivation") as on_deactivation:
            game.tick(10.0)
            on_deactivation.assert_not_called()
            game.tick(30.0)
        on_deactivation.assert_called_once()
        assert on_deactivation.call_args[0][0] == kind

    def test_expiring_power_still_applies_last_tick(self):
        """The per-tick effect runs before the expiry check."""
        game = make_game(snake_positions=COILED)
        game.power_ups = [ActivePowerUp(PowerKind.invulnerability(), activated_at=0.0)]
        game.handle_intent(MOVE_UP)
        game.tick(25.0)
        assert game.power_ups == []
        assert game.snake.alive is True


class TestIntents:
    """Tests for input intents and restart."""

    def test_move_intent_is_queued(self):
        """Move intents go through the snake's direction queue."""
        game = make_game()
        game.handle_intent(MOVE_UP)
        assert game.snake.direction == RIGHT
        game.tick(1.0)
        assert game.snake.direction == UP

    def test_reverse_intent_ignored(self):
        """Reversing straight back is ignored."""
        game = make_game(snake_positions=[(5, 5), (4, 5)])
        game.handle_intent(MOVE_LEFT)
        game.tick(1.0)
        assert game.snake.direction == RIGHT
        assert game.snake.alive is True

    def test_unknown_intent_raises(self):
        """Unknown intents are rejected."""
        game = make_game()
        with pytest.raises(ValueError):
            game.handle_intent("JUMP")

    def test_restart_resets_everything(self):
        """RESTART rebuilds the snake and clears score, food and power-ups."""
        game = make_game(snake_positions=COILED)
        game.score = 12
        game.power_ups = [ActivePowerUp(PowerKind.invulnerability(), activated_at=0.0)]
        game.snake.kill()
        game.handle_intent(RESTART)
        assert game.score == 0
        assert game.food == []
        assert game.power_ups == []
        assert game.snake.alive is True
        assert len(game.snake) == 1
        assert game.snake.direction == RIGHT
        assert game.tick_number == 0


class TestGameStateSnapshot:
    """Tests for get_current_state()."""

    def test_snapshot_contents(self):
        """The snapshot mirrors snake, food, score and power-ups."""
        game = make_game(snake_positions=[(5, 5), (4, 5)], food=())
        game.food = [spawn((1, 2), PowerKind.score_multiplier(2))]
        game.score = 3
        game.power_ups = [ActivePowerUp(PowerKind.score_multiplier(2), activated_at=0.0)]
        state = game.get_current_state()
        assert state.snake_positions == [(5, 5), (4, 5)]
        assert state.head == (5, 5)
        assert state.direction == RIGHT
        assert state.alive is True
        assert state.score == 3
        assert state.food == [((1, 2), PowerType.SCORE_MULTIPLIER)]
        assert state.power_ups == ["Score x2"]
        assert (state.width, state.height) == (10, 10)

    def test_snapshot_is_detached(self):
        """Mutating the game afterwards does not change an old snapshot."""
        game = make_game()
        state = game.get_current_state()
        game.tick(1.0)
        assert state.snake_positions == [(5, 5)]


class FixedPlayer(Player):
    def __init__(self, intents):
        self.intents = list(intents)

    def get_intent(self, game_state):
        return self.intents.pop(0) if self.intents else None


class TestRunHeadless:
    """Tests for the headless runner."""

    def test_runs_until_tick_limit(self):
        """Running straight, the snake cannot outgrow a 30-cell row in 25 ticks."""
        config = GameConfig(grid_width=30, grid_height=6, seed=3)
        result = run_headless(config, FixedPlayer([]), max_ticks=25)
        assert result["ticks"] == 25
        assert result["alive"] is True
        assert 1 <= result["length"] <= 26

    def test_seeded_runs_are_reproducible(self):
        """The same seed gives the same result."""
        config = GameConfig(grid_width=10, grid_height=10, seed=11)
        first = run_headless(config, RandomPlayer(random.Random(1)), max_ticks=200)
        second = run_headless(config, RandomPlayer(random.Random(1)), max_ticks=200)
        assert first == second

    def test_summary_keys(self):
        """The summary reports ticks, score, liveness and length."""
        config = GameConfig(grid_width=10, grid_height=10, seed=5)
        result = run_headless(config, RandomPlayer(random.Random(2)), max_ticks=50)
        assert set(result) == {"ticks", "score", "alive", "length", "power_ups"}


class TestCli:
    """Tests for the command line entry point."""

    def test_build_config_overrides_env(self, monkeypatch):
        """Command line values win over environment values."""
        monkeypatch.setenv("SNAKE_GRID_WIDTH", "40")
        monkeypatch.setenv("SNAKE_GRID_HEIGHT", "25")
        args = type("Args", (), {
            "width": 12, "height": None, "cell_size": None, "ups": 10.0, "seed": None,
        })()
        config = build_config(args)
        assert config.grid_width == 12
        assert config.grid_height == 25
        assert config.updates_per_second == 10.0

    def test_headless_cli(self, capsys):
        """--headless prints a JSON run summary."""
        main(["--headless", "--width", "8", "--height", "8", "--seed", "4", "--max-ticks", "30"])
        out = capsys.readouterr().out
        assert "Run Summary" in out
        assert '"ticks"' in out

    def test_startup_error_exits(self):
        """Invalid configuration exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--headless", "--width", "0"])
        assert exc_info.value.code == 1
