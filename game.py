from __future__ import annotations

# Facade module that re-exports the lianliankan core API.
# The Flask app and tests import from here; single-responsibility modules
# live under lianliankan_core/*.

try:
    from .lianliankan_core.board import Board, Coord, Tile, as_coord  # type: ignore
    from .lianliankan_core.deal import generate_board, fisher_yates, lay_out  # type: ignore
    from .lianliankan_core.moves import (  # type: ignore
        straight_reachable,
        direct_path,
        one_turn_path,
        two_turn_path,
        can_connect,
        count_turns,
    )
    from .lianliankan_core.mutate import (  # type: ignore
        MatchOutcome,
        remove_tiles,
        is_game_completed,
        find_move,
        has_possible_moves,
        shuffle_board,
        attempt_match,
    )
    from .lianliankan_core.scoring import (  # type: ignore
        GAME_CONFIGS,
        GameConfig,
        GameResult,
        is_valid_difficulty,
        get_game_config,
        calculate_score,
        validate_game_result,
    )
except ImportError:
    from lianliankan_core.board import Board, Coord, Tile, as_coord  # type: ignore
    from lianliankan_core.deal import generate_board, fisher_yates, lay_out  # type: ignore
    from lianliankan_core.moves import (  # type: ignore
        straight_reachable,
        direct_path,
        one_turn_path,
        two_turn_path,
        can_connect,
        count_turns,
    )
    from lianliankan_core.mutate import (  # type: ignore
        MatchOutcome,
        remove_tiles,
        is_game_completed,
        find_move,
        has_possible_moves,
        shuffle_board,
        attempt_match,
    )
    from lianliankan_core.scoring import (  # type: ignore
        GAME_CONFIGS,
        GameConfig,
        GameResult,
        is_valid_difficulty,
        get_game_config,
        calculate_score,
        validate_game_result,
    )


def main() -> None:
    # CLI driver delegated to lianliankan_core.cli
    try:
        from .lianliankan_core.cli import main as _main  # type: ignore
    except ImportError:
        from lianliankan_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
