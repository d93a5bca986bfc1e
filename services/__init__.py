"""
services/ - Business Logic Layer
=================================
Services own the in-memory state of a session and implement every
operation the console offers. They never print; handlers render results.
"""
