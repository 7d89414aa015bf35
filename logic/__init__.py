"""logic — Game rules package.

Subpackages
-----------
enemies/    — enemy variant registry, smart and dumb move functions

Top-level modules
-----------------
pathfinding — best-first search on a grid snapshot
movement    — one-cell moves for enemies (axis-greedy) and the player
tick        — GameSession: player input, timed enemy passes, win / lose
"""
