"""ROT13 file encryption/decryption."""

from .cipher import rot13
from .cli import main
from .config import ArgumentError, Invocation
from .executor import (
    ConsoleReporter,
    EventType,
    FilePipeline,
    PipelineEvent,
    Stage,
    get_file_name,
    run,
)

__all__ = [
    "rot13",
    "main",
    "ArgumentError",
    "Invocation",
    "FilePipeline",
    "PipelineEvent",
    "EventType",
    "Stage",
    "ConsoleReporter",
    "get_file_name",
    "run",
]
