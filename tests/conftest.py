"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import os
import random
from typing import Callable, Generator, Sequence

# Headless pygame: must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from engine import glyphs
from engine.ai.core import EnemyAI
from engine.config import AIConfig
from engine.message_log import MessageLog
from world.entities import Player
from world.game_map import GameMap


class FixedRandom(random.Random):
    """Random whose randint always returns the same value."""

    def __init__(self, value: int) -> None:
        super().__init__(0)
        self.value = value
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        return self.value


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    pygame.display.set_mode((64, 64), pygame.HIDDEN)
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def unicode_glyphs() -> Generator[None, None, None]:
    """Each test starts with unicode glyphs on and restores the switch after."""
    previous = glyphs.use_unicode
    glyphs.set_unicode(True)
    yield
    glyphs.set_unicode(previous)


@pytest.fixture
def make_map() -> Callable[[Sequence[str]], GameMap]:
    """
    Factory building a GameMap from ASCII rows ('.' floor, '#' wall).
    """
    return GameMap.from_ascii


@pytest.fixture
def open_map() -> GameMap:
    """A 20x20 map of plain floor."""
    return GameMap.filled(20, 20)


@pytest.fixture
def message_log() -> MessageLog:
    return MessageLog(max_size=200)


@pytest.fixture
def ai_config() -> AIConfig:
    """Fresh defaults, independent of any config file on disk."""
    return AIConfig()


@pytest.fixture
def ai(ai_config: AIConfig) -> EnemyAI:
    """EnemyAI with a seeded generator."""
    return EnemyAI(config=ai_config, rng=random.Random(1234))


@pytest.fixture
def player() -> Player:
    """Player at (10, 10) with 30 hp and 1 defense."""
    return Player(10, 10)


@pytest.fixture
def fixed_rng() -> Callable[[int], FixedRandom]:
    return FixedRandom
