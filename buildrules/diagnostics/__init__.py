"""Diagnostics helpers for build reports."""
