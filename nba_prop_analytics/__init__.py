"""NBA player prop analytics.

Hit-rate, trend and edge analytics over a player's recent game log.
"""

__version__ = "0.1.0"
