"""
Simulator package for the Idle Auto-Battle Simulator.

This package contains the combat core of an idle RPG: stat resolution,
monster encounters, targeting, rewards and loot, together with the event
bus, the service contracts and a console demo.
"""
