"""
utils/ - Shared Helpers
========================
Logging setup and the exception types shared by every layer.
"""
