"""Fitness Tracker API package: workouts, progress entries and users over REST.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
