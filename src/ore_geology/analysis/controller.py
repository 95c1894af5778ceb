"""Submission lifecycle for analysis requests.

States::

    Idle -> Submitting -> Success | Failure -> Submitting -> ...

At most one request is in flight. A ``submit`` while ``Submitting`` is
rejected rather than queued.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from ore_geology.analysis.assembler import AnalysisMode
from ore_geology.analysis.assembler import RequestAssembler
from ore_geology.analysis.session import SessionFactory
from ore_geology.errors import BackendError
from ore_geology.errors import ConfigurationError
from ore_geology.errors import EncodingError

logger = logging.getLogger(__name__)


class View(str, enum.Enum):
    """Presentation surfaces."""

    INPUTS = "inputs"
    RESULTS = "results"
    HEATMAP = "heatmap"


class FailureKind(str, enum.Enum):
    CONFIGURATION = "configuration"
    ENCODING = "encoding"
    BACKEND = "backend"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    mode: AnalysisMode


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Failure:
    message: str
    kind: FailureKind


AnalysisState = Idle | Submitting | Success | Failure


class AnalysisController:
    """Owns the submission state machine and the active view."""

    def __init__(self, assembler: RequestAssembler, session_factory: SessionFactory):
        self.assembler = assembler
        self.session_factory = session_factory
        self._state: AnalysisState = Idle()
        self._view = View.INPUTS
        self._last_mode: AnalysisMode | None = None

    @property
    def state(self) -> AnalysisState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return isinstance(self._state, Submitting)

    @property
    def result(self) -> str | None:
        return self._state.text if isinstance(self._state, Success) else None

    @property
    def error(self) -> str | None:
        return self._state.message if isinstance(self._state, Failure) else None

    @property
    def last_mode(self) -> AnalysisMode | None:
        """Mode of the most recent submission."""
        return self._last_mode

    @property
    def view(self) -> View:
        return self._view

    def set_view(self, view: View) -> None:
        self._view = view

    def reset(self) -> bool:
        """Drop any result or error. Not allowed while submitting."""
        if self.is_submitting:
            return False
        self._state = Idle()
        self._last_mode = None
        return True

    async def submit(self, mode: AnalysisMode) -> bool:
        """Run one submission to completion.

        Returns False, without touching state, if a request is already in
        flight. Every error ends in ``Failure``; nothing is retried.
        """
        if self.is_submitting:
            logger.warning("[SUBMIT] Rejected: a request is already in flight")
            return False

        self._view = View.RESULTS
        self._state = Submitting(mode)
        self._last_mode = mode
        logger.info(f"[SUBMIT] Starting {type(mode).__name__}")

        try:
            session = self.session_factory()
            request = await self.assembler.build_request(mode)
            text = await session.generate(request)
        except ConfigurationError as e:
            logger.error(f"[SUBMIT] Configuration error: {e}")
            self._state = Failure(str(e), FailureKind.CONFIGURATION)
        except EncodingError as e:
            logger.warning(f"[SUBMIT] Aborted before backend call: {e}")
            self._state = Failure(str(e), FailureKind.ENCODING)
        except BackendError as e:
            logger.error(f"[SUBMIT] Backend error: {e}")
            self._state = Failure(self.assembler.locale.generic_error, FailureKind.BACKEND)
        except Exception:
            self._state = Failure(self.assembler.locale.generic_error, FailureKind.BACKEND)
            raise
        else:
            logger.info(f"[SUBMIT] Completed with {len(text)} characters")
            self._state = Success(text)
        return True
