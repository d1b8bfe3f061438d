"""
Service layer.

Each service encapsulates the business logic for one domain and works
on a ``Database`` handle passed in at construction time, so API
handlers never touch SQL directly.
"""
