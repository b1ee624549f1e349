"""
Application Layer for the LiftLog API.

This package contains:
- ports/: Abstract storage interface (what the application needs)
- repositories/: ExerciseCatalog and WorkoutLogRepository over the port
- use_cases/: Startup seeding of the exercise catalog
- exceptions: Error taxonomy shared with the infrastructure layer
"""
