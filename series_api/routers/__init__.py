"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter included by the application in app.py.
"""
