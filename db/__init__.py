"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization, and the
execute-and-fetch store the repositories issue their SQL through.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
