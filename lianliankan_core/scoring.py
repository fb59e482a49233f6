from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict

logger = logging.getLogger(__name__)

MAX_TIME = 180  # seconds, nominal game window
IDLE_TIME_FACTOR = 1.5
MIN_TIME_PER_TILE = 0.3  # seconds
DIFFICULTY_MULTIPLIERS: Dict[str, float] = {
    'easy': 1.0,
    'medium': 1.5,
    'hard': 2.0,
}
DIFFICULTY_MIN_TIMES: Dict[str, int] = {
    'easy': 5,
    'medium': 10,
    'hard': 15,
}
MOVE_SLACK = 2  # reshuffles can shave up to two matches off the pair count


@dataclass(frozen=True)
class GameConfig:
    size: int
    tile_types: int
    difficulty: str


@dataclass(frozen=True)
class GameResult:
    """Client-reported summary of a finished game. Untrusted until validated."""
    time_seconds: Any
    moves: Any
    board_size: Any
    difficulty: Any
    completed: Any


GAME_CONFIGS: Dict[str, GameConfig] = {
    'easy': GameConfig(size=6, tile_types=8, difficulty='easy'),
    'medium': GameConfig(size=8, tile_types=12, difficulty='medium'),
    'hard': GameConfig(size=10, tile_types=16, difficulty='hard'),
}
DEFAULT_DIFFICULTY = 'easy'


def is_valid_difficulty(difficulty: Any) -> bool:
    return isinstance(difficulty, str) and difficulty in GAME_CONFIGS


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful time or move count
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_game_config(difficulty: Any) -> GameConfig:
    """
    Preset for a difficulty tag. Unknown tags fall back to the easy preset
    instead of failing; callers that need strict rejection should check
    `is_valid_difficulty` first.
    """
    if not is_valid_difficulty(difficulty):
        logger.warning('unknown difficulty %r, falling back to %s', difficulty, DEFAULT_DIFFICULTY)
        return GAME_CONFIGS[DEFAULT_DIFFICULTY]
    return GAME_CONFIGS[difficulty]


def base_score(board_size: int, time_seconds: float, moves: int) -> float:
    """Score before the difficulty multiplier."""
    cells = board_size * board_size
    base = cells * 10
    time_bonus = max(0, MAX_TIME - time_seconds) * 2
    optimal_moves = cells / 2 - 1
    move_bonus = max(0, optimal_moves - moves) * 5
    return base + time_bonus + move_bonus


def calculate_score(result: GameResult) -> int:
    if not (_is_number(result.time_seconds) and _is_number(result.moves) and _is_number(result.board_size)):
        logger.debug('score requested for malformed result %r', result)
        return 0
    if not result.completed:
        return 0
    multiplier = DIFFICULTY_MULTIPLIERS[result.difficulty] if is_valid_difficulty(result.difficulty) else 1.0
    total = _round_half_up(base_score(result.board_size, result.time_seconds, result.moves) * multiplier)
    return max(total, 0)


def validate_game_result(result: GameResult, expected_config: GameConfig) -> bool:
    """
    Plausibility gate for a client-submitted result. Any single failed check
    rejects the whole result.
    """
    if not (_is_number(result.time_seconds) and _is_number(result.moves)):
        logger.debug('rejected: non-numeric time or moves in %r', result)
        return False

    time_seconds = result.time_seconds
    moves = result.moves
    board_size = result.board_size
    difficulty = result.difficulty

    if board_size != expected_config.size:
        logger.debug('rejected: board size %r, expected %d', board_size, expected_config.size)
        return False

    if not is_valid_difficulty(difficulty):
        logger.debug('rejected: unknown difficulty %r', difficulty)
        return False

    cells = board_size * board_size
    min_time = max(cells * MIN_TIME_PER_TILE, DIFFICULTY_MIN_TIMES[difficulty])
    if time_seconds < min_time:
        logger.debug('rejected: time %s below minimum %s', time_seconds, min_time)
        return False

    min_moves = max(1, cells / 2 - MOVE_SLACK)
    max_moves = cells * 2
    if moves < min_moves or moves > max_moves:
        logger.debug('rejected: %s moves outside [%s, %s]', moves, min_moves, max_moves)
        return False

    max_time = MAX_TIME * IDLE_TIME_FACTOR
    if time_seconds > max_time:
        logger.debug('rejected: time %s above idle limit %s', time_seconds, max_time)
        return False

    return True
