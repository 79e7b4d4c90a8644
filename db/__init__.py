"""
db/ - Database Layer
====================
Handles the MySQL connection, schema initialization, and raw SQL operations.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
