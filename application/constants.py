"""
Store collection names (fixed, case-sensitive).
"""

EXERCISES_COLLECTION = "exercises"
WORKOUT_LOGS_COLLECTION = "workout_logs"
FLAGS_COLLECTION = "initializationFlags"
