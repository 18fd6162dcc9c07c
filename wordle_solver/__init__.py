"""
wordle_solver: information-theoretic guess selection for Wordle-style games.

  engine    Word, Pattern and the metrics engine (entropy / expected / minimax)
  solvers   selection algorithms, adaptive tiering and the strategy registry
  datasets  word-list loading and validation
  harness   game loop and result writers used by the CLI
"""

__version__ = "1.0.0"
