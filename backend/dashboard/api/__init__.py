"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share the {"error": {...}} envelope, except form states,
      which keep the {"errors", "message"} shape the invoice forms render

Design Decisions:
    - Thin routes delegate to services/invoice_actions.py
"""
