"""
Services module for the Idle Auto-Battle Simulator.

This module declares the contracts of the collaborators of the combat core,
the registry of optional integrations and headless in-memory
implementations.
"""
