"""Clinic adapter."""
