import argparse
import dataclasses
import json
import logging
import random
import sys
import time
from typing import Callable, Dict, List, Optional, Any

from snake_arcade.config import GameConfig
from snake_arcade.domain import power_ups
from snake_arcade.domain.constants import INTENT_TO_DIRECTION, RESTART, VALID_INTENTS
from snake_arcade.domain.food import Food, spawn
from snake_arcade.domain.game_state import GameState
from snake_arcade.domain.position import random_position
from snake_arcade.domain.power_ups import ActivePowerUp, TickContext
from snake_arcade.domain.snake import Snake
from snake_arcade.players import Player, RandomPlayer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake
      - Food on the board
      - Active power-ups
      - Score
      - The fixed-timestep clock
    """
    def __init__(
        self,
        width: int,
        height: int,
        tick_interval: float,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.width = width
        self.height = height
        self.tick_interval = tick_interval
        self.rng = rng or random.Random()
        self.clock = clock

        self.snake = self._new_snake()
        self.food: List[Food] = []
        self.power_ups: List[ActivePowerUp] = []
        self.score = 0
        self.scored = False
        self.tick_number = 0
        self.last_update = self.clock()

    def _new_snake(self) -> Snake:
        start = random_position(self.width, self.height, self.rng)
        return Snake([start], self.width, self.height)

    def restart(self):
        """Throw away the current game and start a new one."""
        self.snake = self._new_snake()
        self.food = []
        self.power_ups = []
        self.score = 0
        self.scored = False
        self.tick_number = 0
        self.last_update = self.clock()
        logger.info(f"Game restarted, snake at {self.snake.head}")

    def handle_intent(self, intent: str):
        if intent not in VALID_INTENTS:
            raise ValueError(f"Unknown intent {intent!r}.")
        if intent == RESTART:
            self.restart()
        else:
            self.snake.set_direction(INTENT_TO_DIRECTION[intent])

    def spawn_food(self) -> Food:
        position = random_position(self.width, self.height, self.rng)
        food = spawn(position, power_ups.roll_power(self.rng))
        self.food.append(food)
        logger.debug(f"Spawned food at {food.position} ({food.power.type.value})")
        return food

    def update(self, now: Optional[float] = None) -> bool:
        """
        Called once per frame by the host loop. Runs a tick only if a full
        tick interval has elapsed and the snake is alive. Returns True if a
        tick ran.
        """
        if now is None:
            now = self.clock()
        if now - self.last_update < self.tick_interval or not self.snake.alive:
            return False
        self.tick(now)
        return True

    def _context(self) -> TickContext:
        return TickContext(score=self.score, scored=self.scored, snake_alive=self.snake.alive)

    def _commit(self, ctx: TickContext):
        self.score = ctx.score
        if ctx.snake_alive and not self.snake.alive:
            self.snake.revive()
        else:
            self.snake.alive = ctx.snake_alive

    def tick(self, now: float):
        """
        Execute one tick:
          1) Eat any food under the head (activate power-ups, score, grow)
          2) Move the snake
          3) Run per-tick effects of active power-ups, then expire old ones
          4) Spawn new food if the board is empty
        """
        eaten: List[Food] = []
        for food in list(self.food):
            if not self.snake.check_collision(food.position):
                continue
            logger.debug(f"Food eaten at {food.position}")
            if food.has_power:
                ctx = self._context()
                power_ups.on_activation(food.power, ctx)
                self._commit(ctx)
                self.power_ups.append(ActivePowerUp(kind=food.power, activated_at=now))
                logger.debug(f"Activated power-up: {power_ups.display_text(food.power)}")
            self.score += 1
            self.scored = True
            eaten.append(food)
            self.snake.grow()

        for food in eaten:
            self.food.remove(food)

        was_alive = self.snake.alive
        self.snake.advance()

        expired: List[ActivePowerUp] = []
        for active in list(self.power_ups):
            ctx = self._context()
            power_ups.apply_effect(active.kind, ctx)
            self._commit(ctx)
            if active.is_expired(now):
                expired.append(active)

        for active in expired:
            ctx = self._context()
            power_ups.on_deactivation(active.kind, ctx)
            self._commit(ctx)
            self.power_ups.remove(active)
            logger.debug(f"Power-up expired: {active.display_text}")

        if was_alive and not self.snake.alive:
            logger.info(f"Snake died at tick {self.tick_number} with score {self.score}")

        if not self.food:
            self.spawn_food()

        self.scored = False
        self.tick_number += 1
        self.last_update = now

    def power_up_texts(self) -> List[str]:
        return [active.display_text for active in self.power_ups]

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=[tuple(p) for p in self.snake.positions],
            direction=self.snake.direction,
            alive=self.snake.alive,
            score=self.score,
            width=self.width,
            height=self.height,
            food=[(tuple(f.position), f.power.type) for f in self.food],
            power_ups=self.power_up_texts(),
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")


# -------------------------------
# Headless runner
# -------------------------------

def run_headless(config: GameConfig, player: Player, max_ticks: int) -> Dict[str, Any]:
    """
    Runs a single game without a window, driven by a scripted player.

    The game clock is simulated: each iteration advances it by exactly one
    tick interval and runs one tick, so power-up lifetimes behave as in
    real time.

    Args:
        config: Board size, update rate and seed.
        player: Source of intents, consulted once per tick.
        max_ticks: Upper bound on the number of ticks to run.

    Returns:
        A dictionary summarizing the run (ticks, score, alive, length).
    """
    sim_time = 0.0
    game = SnakeGame(
        width=config.grid_width,
        height=config.grid_height,
        tick_interval=config.tick_interval,
        rng=random.Random(config.seed),
        clock=lambda: sim_time,
    )

    while game.tick_number < max_ticks and game.snake.alive:
        intent = player.get_intent(game.get_current_state())
        if intent is not None:
            game.handle_intent(intent)
        sim_time += config.tick_interval
        game.tick(sim_time)

    state = game.get_current_state()
    logger.info(f"Headless run finished after {state.tick_number} ticks: {state!r}")
    logger.debug("\n" + state.print_board())

    return {
        "ticks": state.tick_number,
        "score": state.score,
        "alive": state.alive,
        "length": len(state.snake_positions),
        "power_ups": state.power_ups,
    }


# -------------------------------
# Main Entry Point
# -------------------------------

def build_config(args: argparse.Namespace) -> GameConfig:
    """Environment config with command line overrides applied."""
    config = GameConfig.from_env()
    overrides = {
        "grid_width": args.width,
        "grid_height": args.height,
        "cell_size": args.cell_size,
        "updates_per_second": args.ups,
        "seed": args.seed,
    }
    return dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Play Snake on a wrap-around board with timed power-ups."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in cells (default: SNAKE_GRID_WIDTH or 30)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in cells (default: SNAKE_GRID_HEIGHT or 20)")
    parser.add_argument("--cell-size", type=int, default=None,
                        help="Cell size in pixels (default: SNAKE_CELL_SIZE or 32)")
    parser.add_argument("--ups", type=float, default=None,
                        help="Simulation updates per second (default: SNAKE_UPDATES_PER_SECOND or 17)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible spawns")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window, driven by a random player")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Tick limit for headless runs (default: 1000)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = build_config(args)

        if args.headless:
            result = run_headless(config, RandomPlayer(random.Random(config.seed)), args.max_ticks)
            print("\nRun Summary:")
            print(json.dumps(result, indent=2))
            return

        from snake_arcade.services.renderer import FrameRenderer
        from snake_arcade.services.window import run_window

        renderer = FrameRenderer(cell_size=config.cell_size, font_path=config.font_path)
        game = SnakeGame(
            width=config.grid_width,
            height=config.grid_height,
            tick_interval=config.tick_interval,
            rng=random.Random(config.seed),
        )
        run_window(game, renderer, config)

    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
