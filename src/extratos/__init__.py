"""Top level package for theatrical invoice statements.

The public entry point is :func:`extratos.statement.produce_statement`; the
remaining modules hold the pricing rules, the aggregation pass and the
renderers used to build each statement.
"""

__all__ = [
    "aggregation",
    "cli",
    "commands",
    "errors",
    "loader",
    "models",
    "pricing",
    "renderers",
    "reporting",
    "settings",
    "statement",
    "storage",
]
