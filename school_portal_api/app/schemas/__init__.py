"""
Pydantic schema definitions for API payloads.

Field names follow the column names of the ``user`` table, which are
also the wire contract of the API.  Schemas are separated from the
database layer to decouple API representation from persistence.
"""
