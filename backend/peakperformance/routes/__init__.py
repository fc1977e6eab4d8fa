# Routes package init
"""
PeakPerformance Backend — API Routes Package
==============================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - resources.py: CRUD routers for the nine resources under /api/<resource>
    - health.py:    GET /        (liveness banner)
                    GET /health  (service and database status)

Design Principle:
    Routes are THIN: they extract path parameters and bodies, call the
    service, and return its result. Status codes for failures come from the
    exception handlers in main.py.
"""
