"""Context object shared by all handlers."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from ore_geology.analysis.assembler import RequestAssembler
from ore_geology.analysis.controller import AnalysisController
from ore_geology.analysis.session import AnalysisSession
from ore_geology.analysis.session import SessionFactory
from ore_geology.analysis.session import create_session
from ore_geology.analysis.store import InputStore
from ore_geology.config import AppConfig
from ore_geology.locales import LocaleProvider


@dataclass
class GeologyContext:
    """Shared state for one geology room: inputs, locale, submissions."""

    config: AppConfig = field(default_factory=AppConfig)
    session_factory: SessionFactory | None = None

    # Derived (set in __post_init__)
    store: InputStore = field(init=False)
    locale: LocaleProvider = field(init=False)
    assembler: RequestAssembler = field(init=False)
    controller: AnalysisController = field(init=False)

    def __post_init__(self) -> None:
        self.store = InputStore()
        self.locale = LocaleProvider(self.config.locale)
        self.assembler = RequestAssembler(self.store, self.locale)
        factory = self.session_factory or self._new_session
        self.controller = AnalysisController(self.assembler, factory)

    def _new_session(self) -> AnalysisSession:
        """Fresh backend session for one submission."""
        return create_session(self.config)

    def set_locale(self, code: str) -> None:
        """Switch the active locale for labels, prompts and messages."""
        self.locale = LocaleProvider(code)
        self.assembler.locale = self.locale
