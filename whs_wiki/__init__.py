"""whs-wiki - UNESCO World Heritage Sites and their Wikipedia articles."""

__version__ = "0.1.0"
