"""Framework-free growth model: scoring, alert rules and the daily step."""
