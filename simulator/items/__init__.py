"""
Items system module for the Idle Auto-Battle Simulator.

This module contains the item templates, the inventory stacks created from
them and the drop tables rolled when a monster dies.
"""
