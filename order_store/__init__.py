"""
Order Store: relational order schema, reporting queries and order archiving
"""
