"""
Headless enemy-AI simulation.

Drops a player and a handful of enemies into a small ASCII arena and runs
rounds of: player kites away from the nearest enemy, enemies learn from
the move, every living enemy takes a turn. The message log is printed at
the end.

    python main.py --rounds 20 --seed 7 --enemies goblin,archer,stone_golem
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from engine import glyphs
from engine.ai import EnemyAI, manhattan_distance, move_away_from, run_enemy_turns
from engine.config import AIConfig, load_config
from engine.error_handler import GameError, configure_logging, get_logger, log_error
from engine.message_log import MessageLog
from systems.enemies import EnemyType
from systems.knowledge import observe_player_move
from telemetry.logger import telemetry
from world.entities import Enemy, Player
from world.game_map import GameMap

log = get_logger("main")

ARENA = (
    "####################",
    "#..................#",
    "#..####.....####...#",
    "#..#..........#....#",
    "#..#....~~....#....#",
    "#.......~~.........#",
    "#..#..........#....#",
    "#..####.....####...#",
    "#..................#",
    "####################",
)

PLAYER_START = (9, 5)
ENEMY_STARTS = [(1, 1), (18, 1), (1, 8), (18, 8), (10, 1), (10, 8)]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a headless enemy AI simulation.")
    parser.add_argument("--rounds", type=int, default=15, help="number of rounds to simulate")
    parser.add_argument("--seed", type=int, default=None, help="seed for the AI random generator")
    parser.add_argument("--config", type=Path, default=None, help="JSON file with AI tunables")
    parser.add_argument("--telemetry", type=Path, default=None, help="write JSONL telemetry here")
    parser.add_argument(
        "--enemies",
        default="goblin,archer,stone_golem",
        help="comma-separated enemy types (e.g. rat,archer,dragon)",
    )
    parser.add_argument("--ascii", action="store_true", help="use ASCII fallbacks for message glyphs")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="console log level (the file log always records DEBUG)",
    )
    return parser.parse_args(argv)


def spawn_enemies(names: str) -> List[Enemy]:
    enemies = []
    for (x, y), name in zip(ENEMY_STARTS, [n.strip() for n in names.split(",") if n.strip()]):
        try:
            enemy_type = EnemyType(name.lower())
        except ValueError as exc:
            raise GameError(f"Unknown enemy type {name!r}", user_message=f"No such enemy: {name}") from exc
        enemies.append(Enemy.spawn(enemy_type, x, y))
    return enemies


def simulate(
    game_map: GameMap,
    player: Player,
    enemies: List[Enemy],
    ai: EnemyAI,
    rounds: int,
    message_log: MessageLog,
) -> int:
    """Run up to `rounds` rounds. Returns the number of rounds played."""
    played = 0
    for _ in range(rounds):
        if not player.is_alive:
            break
        living = [e for e in enemies if e.is_alive]
        if not living:
            break

        previous = player.position
        nearest = min(living, key=lambda e: manhattan_distance(e.position, player.position))
        move_away_from(player, nearest.position, game_map)
        observe_player_move(living, previous, player.position, ai.policy)

        run_enemy_turns(living, player, game_map, message_log, ai)
        played += 1
    return played


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(console_level=getattr(logging, args.log_level))
    pygame.init()

    try:
        config = load_config(args.config) if args.config else AIConfig()
        if args.seed is not None:
            config.seed = args.seed
        glyphs.set_unicode(config.use_unicode_glyphs and not args.ascii)

        if args.telemetry is not None:
            telemetry.init(args.telemetry)

        game_map = GameMap.from_ascii(ARENA)
        player = Player(*PLAYER_START)
        enemies = spawn_enemies(args.enemies)
    except GameError as e:
        log_error(e, "main")
        print(e.user_message, file=sys.stderr)
        pygame.quit()
        return 2

    ai = EnemyAI(config=config)
    message_log = MessageLog()
    played = simulate(game_map, player, enemies, ai, args.rounds, message_log)

    for line in message_log.texts():
        print(line)
    print(f"-- {played} rounds, player hp {player.hp}/{player.stats.max_hp}")
    for enemy in enemies:
        print(
            f"   {enemy.name:<16} at {enemy.position} tier={enemy.knowledge.tier.name} "
            f"hp={enemy.hp}"
        )

    telemetry.close()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
