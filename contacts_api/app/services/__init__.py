"""
Service layer abstraction.

Services hold the business logic for a domain and are the only code
that talks to storage.  Endpoint modules stay thin: they translate HTTP
to service calls and service results back to HTTP.
"""
