"""
HTTP layer of the playground.

``router`` in ``api/router.py`` bundles the routers from
``api/endpoints`` under the ``/api`` prefix, except the welcome page
which is served at ``/``.
"""
