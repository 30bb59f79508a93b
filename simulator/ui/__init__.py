"""
User interface module for the Idle Auto-Battle Simulator.

This module provides the console views of the combat core: an event log and
a status table with health and attack cadence bars.
"""
