"""
Application Layer for the Workout Suggestion API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Use cases orchestrating repositories and the engine
- exceptions: Errors shared by the application and infrastructure layers
"""
