"""Greenhouse Digital Twin: environment-to-growth simulation for a 90-day crop."""
