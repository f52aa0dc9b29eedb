"""
Service layer abstraction.

Each service encapsulates the business rules for one concern.  API
handlers build on these services and only translate between HTTP and
Python values.
"""
