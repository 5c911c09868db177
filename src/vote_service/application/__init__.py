"""
Application Layer

Orchestrates domain logic through:
- interfaces/: Ports for external services (document validation, session state)
- services/: Topic lookup, session management and the vote workflow
- dtos.py / converters.py: Request/result models and their mapping
"""
