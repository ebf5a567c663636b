"""Domino game simulation for two to four players."""
