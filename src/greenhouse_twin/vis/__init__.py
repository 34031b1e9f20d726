"""Solara dashboard consuming the simulation engine."""
