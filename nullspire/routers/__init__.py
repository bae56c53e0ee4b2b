"""
FastAPI routers grouped by audience (public characters, admin moderation).

Each file inside this package exposes an APIRouter that is included in the
main application (app.py).
"""
