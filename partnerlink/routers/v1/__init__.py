"""v1 router package — all /api/v1/* endpoints live here.

Files:
  vendors.py    — record store endpoints + stateless filtered listing
  directory.py  — directory sessions (criteria, ordered view, drag-and-drop)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to partnerlink/services/.
"""
