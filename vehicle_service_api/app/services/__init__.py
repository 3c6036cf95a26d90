"""
Service layer abstraction.

Each service encapsulates the business rules for one collection and
operates on the ``InMemoryStore`` passed to it.  Handlers stay thin:
they resolve the store, call a service and translate its errors.
"""
