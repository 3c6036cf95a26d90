"""
API package containing the HTTP routes.

``router`` aggregates the domain routers in ``endpoints`` and is
mounted by ``main.create_app`` under ``/api``.
"""
