"""Latex Free Eats: crowdsourced kitchen glove reports for restaurants."""

__version__ = "0.1.0"
