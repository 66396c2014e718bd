"""
Core startup orchestration.
"""

from fitfam.core.initialization import AppContext, FitFamInitializer, initialize

__all__ = ["AppContext", "FitFamInitializer", "initialize"]
