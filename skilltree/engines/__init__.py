"""
Engines - gating rules and per-user progress.
"""
