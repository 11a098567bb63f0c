"""Environments - step the game from code."""

from envs.snake_env import EnvMetadata, SnakeArcadeEnv

__all__ = ["EnvMetadata", "SnakeArcadeEnv"]
