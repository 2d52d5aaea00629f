"""
Service layer abstraction.

Services encapsulate the handler logic for a domain.  They never build
HTTP responses; each operation returns either a record or a
``Failure`` that the API layer hands to the error formatter.
"""
