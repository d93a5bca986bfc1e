"""
handlers/ - Presentation Layer
================================
Console handlers. Each handler prompts the user, delegates to the
appropriate Service, and renders the result with rich.
No business logic lives here.
"""
