"""
db/ - Database Layer
====================
Handles PostgreSQL connections, transaction scoping and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
