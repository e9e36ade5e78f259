"""
structured_logging_demo.services

Business logic used by the demo endpoints.
"""

# Package marker.
