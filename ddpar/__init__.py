"""Par score and par contract calculation for contract bridge double dummy tables."""

__version__ = "0.1.0"