"""Shared domain code for runstreak: streaks, pace conversion and models."""
