"""Validators for Thai identifier numbers."""
