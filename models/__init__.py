"""
models/ - Domain Layer
=======================
Plain dataclasses and enums shared by repositories, services and handlers.
No I/O happens here.
"""
