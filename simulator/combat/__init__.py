"""
Combat system module for the Idle Auto-Battle Simulator.

This module handles the auto-battle: the encounter state machine, the damage
formulas, targeting, delayed actions and the distribution of rewards.
"""
