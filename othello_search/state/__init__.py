"""
State Module

This module provides the game positions searched by the engines. The key
design principle is that states are SWAPPABLE - the search algorithms work
with any state that implements the GameState interface.

Key Components:
    - GameState (ABC): Abstract interface (terminal check, static value,
      move legality, successor generation, hashing)
    - OthelloState: 6x6 Othello, the reference game
    - state_to_planes / render_state: numpy and text representations

Data Flow:
    GameState → state.static_value() → int
                                      Positive = maximizer advantage
                                      Negative = minimizer advantage
"""

from othello_search.state.base import GameState
from othello_search.state.othello import OthelloState
from othello_search.state.representation import state_to_planes, render_state

__all__ = ['GameState', 'OthelloState', 'state_to_planes', 'render_state']
