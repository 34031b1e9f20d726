"""Strongly typed column names for growth history DataFrames.

Defines the data contract between the mesa model and consumers (vis, main).
"""


class ColumnNames:
    """Column name constants matching the serialized GrowthSample fields."""

    DAY = "day"
    HEIGHT = "height"
    HEALTH = "health"
    YIELD = "yield"

    ALL = (DAY, HEIGHT, HEALTH, YIELD)
