"""Pydantic schemas package.

Folder intent:
  common.py     — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  vendor.py     — vendor create DTOs; responses reuse ranking.VendorRecord
  directory.py  — directory session state and drop events
"""
