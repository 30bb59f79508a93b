"""
Event system module for the Idle Auto-Battle Simulator.

This module defines the combat events and the bus that delivers them to the
presentation layers.
"""
