"""Entry point for the Snake game."""

from __future__ import annotations

from classic_snake.game import main

if __name__ == "__main__":
    main()
