"""
Service layer.

Each service encapsulates the logic for one concern: the book and user
collections (bundled together by ``store.ResourceStore``), the
calculator and the status-code table.  Handlers in ``api.endpoints``
only translate HTTP input into calls on these services.
"""
