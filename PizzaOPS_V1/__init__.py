"""
PizzaOPS package

This package provides a modular architecture for the PizzaOPS financial
simulation game.  It separates the monthly close engine, domain objects,
data tables, strategy rules and user interface into distinct subpackages
to encourage maintainability and clarity.
"""

__all__ = ["config", "core", "domain", "data", "rules", "ui"]
