"""
Feedback rules for the pronunciation practice pipeline.

This package contains modules for turning scored attempts into learner feedback:
- feedback.py: Score tiers, tier messages and practice word selection
"""
