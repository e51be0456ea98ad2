"""
Tsukumo source calculator for Nobunaga's Ambition Online.

Computes the exp and the number of tsukumo sources needed to raise a
weapon's tsukumo level to a target level.
"""

__version__ = "0.1.0"
