from __future__ import annotations

import argparse
import random
import time
from typing import Optional, Tuple

from .board import Coord
from .config import configure_logging, default_difficulty
from .deal import generate_board
from .mutate import attempt_match, find_move
from .scoring import GAME_CONFIGS, GameResult, calculate_score, get_game_config, validate_game_result


def _parse_coord(text: str) -> Coord:
    r_s, c_s = [t for t in text.replace(',', ' ').split() if t != '']
    return (int(r_s), int(c_s))


def _parse_pair(text: str) -> Optional[Tuple[Coord, Coord]]:
    parts = [p for p in text.split() if p]
    if len(parts) == 4:
        parts = [f'{parts[0]},{parts[1]}', f'{parts[2]},{parts[3]}']
    if len(parts) != 2:
        return None
    try:
        return _parse_coord(parts[0]), _parse_coord(parts[1])
    except ValueError:
        return None


def main() -> None:
    parser = argparse.ArgumentParser(description='Lianliankan board generator and terminal player')
    parser.add_argument('--difficulty', choices=sorted(GAME_CONFIGS), default=None,
                        help='Preset to play (defaults to LIANLIANKAN_DEFAULT_DIFFICULTY or easy)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal and reshuffles')
    parser.add_argument('--play', action='store_true', help='Play the board interactively')
    parser.add_argument('--show-paths', action='store_true', help='Show the connecting path of each match')
    args = parser.parse_args()

    configure_logging()
    config = get_game_config(args.difficulty or default_difficulty())
    rng = random.Random(args.seed)
    board = generate_board(config.size, config.tile_types, rng=rng)

    print(f'{config.difficulty} board ({config.size}x{config.size}, {config.tile_types} kinds):')
    print(board.pretty())

    if not args.play:
        hint = find_move(board)
        print('\nFirst available match:' if hint else '\nNo match available.', hint or '')
        return

    moves = 0
    started = time.monotonic()
    while True:
        try:
            text = input('Match two tiles as r1,c1 r2,c2 (h for a hint, q to quit): ').strip().lower()
        except EOFError:
            text = 'q'
        if text == 'q':
            print('Game abandoned.')
            return
        if text == 'h':
            print('Try:', find_move(board))
            continue
        pair = _parse_pair(text)
        if pair is None:
            print('Could not parse. Try again.')
            continue
        outcome = attempt_match(board, pair[0], pair[1], rng=rng)
        if not outcome.valid:
            print('Those tiles do not connect.')
            continue
        moves += 1
        if args.show_paths:
            print('Path:', outcome.path)
        if outcome.reshuffled:
            print('No moves left, tiles reshuffled.')
        board = outcome.board
        print(board.pretty(outcome.path if args.show_paths else None))
        if outcome.completed:
            break

    elapsed = int(time.monotonic() - started)
    result = GameResult(time_seconds=elapsed, moves=moves, board_size=config.size,
                        difficulty=config.difficulty, completed=True)
    print(f'Cleared in {elapsed}s with {moves} moves.')
    if validate_game_result(result, config):
        print('Score:', calculate_score(result))
    else:
        print('Result outside the plausible bounds; no score recorded.')
