"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories issue SQL through an injected store, keep derived values in an
injected cache, and return domain model objects.
"""
