"""
Knock Out! - a two-dice elimination game.
"""
