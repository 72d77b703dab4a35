"""Shared helpers for the booking calculator."""
