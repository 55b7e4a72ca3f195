"""Rank lodging near rail stations by fare, travel time, price and rating."""

__version__ = "0.1.0"
