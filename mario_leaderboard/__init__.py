"""
100 Mario Leaderboard Tracker - Core Package

This package contains the modules for:
- Ranking page ingestion (mario_leaderboard.ingestion)
- Snapshot matching, change detection and storage (mario_leaderboard.snapshot)
- Table display (mario_leaderboard.display)
- Shared configuration and utilities
"""

from mario_leaderboard.config import *
