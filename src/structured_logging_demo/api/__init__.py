"""
structured_logging_demo.api

API package for the structured logging demo service.

Responsibilities:
- FastAPI app factory and router modules.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request parsing + delegation to services.
