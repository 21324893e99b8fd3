"""Domain layer for Nexus.

Pure models, board queries and domain events for tasks and notes.
Nothing in this package performs I/O.
"""
