"""
Skill Tree gating service.

Prerequisite DAG over DSA topics, confidence-driven unlocks and tier checkpoints.
"""
