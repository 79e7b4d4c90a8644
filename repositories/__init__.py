"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from the Store Gateway and return domain model objects.
"""
