"""Services package — all business logic lives here, never in routers.

Files:
  vendor.py     — record store access, favorite toggling, summary
  directory.py  — in-memory directory sessions wrapping the ranking engine

Rule: routers call services, services call repositories and the ranking
      engine. No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
