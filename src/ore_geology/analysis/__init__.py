"""
Analysis Package - core components of the geology room.

This package contains:
- store: per-category text and attachment store
- files: file handles accepted as attachments
- parts / encoder: request parts and attachment encoding
- assembler: request assembly for each analysis mode
- session: per-submission backend session
- controller: submission state machine
- search: navigation catalog filter
- context, parser, handlers, formatters, validators: the command surface
"""

from ore_geology.analysis.assembler import AnalysisMode
from ore_geology.analysis.assembler import FullAnalysis
from ore_geology.analysis.assembler import HeatmapScript
from ore_geology.analysis.assembler import NamedModule
from ore_geology.analysis.assembler import RequestAssembler
from ore_geology.analysis.context import GeologyContext
from ore_geology.analysis.controller import AnalysisController
from ore_geology.analysis.controller import AnalysisState
from ore_geology.analysis.controller import Failure
from ore_geology.analysis.controller import Idle
from ore_geology.analysis.controller import Submitting
from ore_geology.analysis.controller import Success
from ore_geology.analysis.controller import View
from ore_geology.analysis.encoder import AttachmentEncoder
from ore_geology.analysis.files import LocalFile
from ore_geology.analysis.files import UploadedFile
from ore_geology.analysis.handlers import HANDLERS
from ore_geology.analysis.parser import ParsedCommand
from ore_geology.analysis.parser import parse_command
from ore_geology.analysis.parts import AnalysisRequest
from ore_geology.analysis.parts import BinaryPart
from ore_geology.analysis.parts import TextPart
from ore_geology.analysis.search import filter_catalog
from ore_geology.analysis.store import Attachment
from ore_geology.analysis.store import InputStore

__all__ = [
    "HANDLERS",
    "AnalysisController",
    "AnalysisMode",
    "AnalysisRequest",
    "AnalysisState",
    "Attachment",
    "AttachmentEncoder",
    "BinaryPart",
    "Failure",
    "FullAnalysis",
    "GeologyContext",
    "HeatmapScript",
    "Idle",
    "InputStore",
    "LocalFile",
    "NamedModule",
    "ParsedCommand",
    "RequestAssembler",
    "Submitting",
    "Success",
    "TextPart",
    "UploadedFile",
    "View",
    "filter_catalog",
    "parse_command",
]
