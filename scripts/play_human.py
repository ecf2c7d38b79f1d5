#!/usr/bin/env python3
"""
Human Play Mode - Play the Snake game yourself.

Controls:
    WASD: Move the snake
    Q / ESC: Quit
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridsnake.game.session import GameSession
from gridsnake.game.loop import GameLoop, GameResult
from gridsnake.game.renderer import PygameRenderer
from gridsnake.game.keyboard import PygameKeyboard
from gridsnake.utils.config_loader import load_config
from gridsnake.utils.log import setup_logging


def main() -> GameResult:
    """Main entry point for human play mode."""
    # Load config
    config = load_config()
    setup_logging(config.logging)

    # Initialize game
    session = GameSession(
        width=config.game.grid_width,
        height=config.game.grid_height,
        initial_length=config.game.initial_length,
        seed=config.game.seed,
        allow_tail_chase=config.game.allow_tail_chase,
    )

    # Initialize renderer
    renderer = PygameRenderer(
        grid_width=config.game.grid_width,
        grid_height=config.game.grid_height,
        cell_size=config.visualization.cell_size,
        title=config.visualization.title,
        show_score=config.visualization.show_score,
    )

    print("\n" + "=" * 50)
    print("Snake Game - Human Mode")
    print("=" * 50)
    print("Controls:")
    print("  WASD: Move")
    print("  Q / ESC: Quit")
    print("=" * 50 + "\n")

    loop = GameLoop(
        session,
        renderer,
        PygameKeyboard(),
        tick_interval=config.game.tick_interval,
    )
    return loop.run()


if __name__ == "__main__":
    main()
