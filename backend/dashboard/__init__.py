"""Acme dashboard invoice API — validated create/update/delete for invoices."""
