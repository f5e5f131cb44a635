"""Utility helpers used across islandgraph.

Small, self-contained modules that do not depend on the traversal engine.
"""
