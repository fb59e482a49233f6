"""
Lianliankan core Python package.

Pure rules engine for the connect-the-pairs tile puzzle. Every function takes
the board explicitly and returns new values; nothing here keeps state between
calls.
Modules:
- board.py: Board, Tile, Coord
- deal.py: board generation and the shared shuffle
- moves.py: connectivity search (direct, one turn, two turns)
- mutate.py: removal, completion, deadlock detection, reshuffle
- scoring.py: presets, score calculation, result validation
- codec.py: plain JSON-able encoding for the HTTP layer
"""
