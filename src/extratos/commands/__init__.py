"""Command implementations exposed through :mod:`extratos.cli`."""
