"""
Core infrastructure: configuration, logging, database access, password
hashing and the service error types.
"""
