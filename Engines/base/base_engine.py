"""Abstract base class for all SymCurv pipeline engines."""
# IMPORTS
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any

logger = logging.getLogger(__name__)


class BaseTrackEngine(ABC):
    """
    Abstract base class for the numeric stages of the pipeline.

    Engines hold only read-only parameters (and matrices); every invocation
    allocates its own output. ``audit`` describes the most recent call.
    """

    SCORE_REFERENCE = 'Override in subclass'

    def __init__(self):
        self.audit = {
            'invoked': False,
            'input_length': 0,
            'positions_scanned': 0,
            'positions_defined': 0,
        }

    @abstractmethod
    def get_engine_name(self) -> str:
        """Return the stage name (e.g., 'Curvature', 'SymCurv')"""
        pass

    @abstractmethod
    def get_parameters(self) -> Dict[str, Any]:
        """Return the parameters this engine was configured with."""
        pass

    def _reset_audit(self, input_length: int) -> None:
        self.audit['invoked'] = True
        self.audit['input_length'] = input_length
        self.audit['positions_scanned'] = 0
        self.audit['positions_defined'] = 0

    def _record_audit(self, scanned: int, defined: int) -> None:
        self.audit['positions_scanned'] = scanned
        self.audit['positions_defined'] = defined
        logger.debug(
            f"{self.get_engine_name()}: scanned {scanned:,} positions, "
            f"defined {defined:,} (input length {self.audit['input_length']:,})"
        )

    def get_statistics(self) -> Dict[str, Any]:
        """Get engine statistics"""
        return {
            'engine': self.get_engine_name(),
            'reference': self.SCORE_REFERENCE,
            'parameters': self.get_parameters(),
        }

    def get_audit_info(self) -> Dict[str, Any]:
        """Get engine execution audit information"""
        return self.audit.copy()
