"""
Triangle peg solitaire core package.

Pure game logic for the 15-hole triangular board, kept free of any
presentation so the Flask app, the CLI and tests share it.
Modules:
- board.py: Board, position/coordinate helpers, start board
- pathways.py: Pathway table and legality queries
- state.py: Idle, Picked, Done
- engine.py: activate() state machine, InvalidActionError
- messages.py: end-of-game phrases
"""
