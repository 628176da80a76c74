"""
Endpoint subpackage.

Each module defines an ``APIRouter`` for one group of routes.  The
routers are aggregated in ``api/router.py`` and included in the main
application.
"""
