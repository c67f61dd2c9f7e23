"""Base engine module - Abstract base class for all SymCurv pipeline engines"""

from Engines.base.base_engine import BaseTrackEngine

__all__ = ["BaseTrackEngine"]
