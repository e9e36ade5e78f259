"""
structured_logging_demo.api.routers

HTTP routers mounted by `structured_logging_demo.api.app`.
"""
