"""
handlers/ - Presentation Layer
================================
Console handlers. Each handler reads user input, delegates to the
appropriate Service, and prints the response back to the user.
No business logic lives here.
"""
