"""
Carbon Credit Market

A ledger of renewable-energy carbon credits: producers are awarded credits for
supplied energy and sell them to clients through bid-and-settle credit orders.
"""

__version__ = "1.0.0"
