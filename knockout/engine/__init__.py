"""
Knock Out! game engine.
Core engine without web framework or UI: random sources, dice, players and the game loop.
"""

# Dice thrown by each player per turn
DICE_PER_TURN = 2
