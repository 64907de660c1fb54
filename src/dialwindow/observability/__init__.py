"""Observability – logging for the dialwindow engine."""
