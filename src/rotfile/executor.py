"""File encryption/decryption pipeline.

The pipeline reads the input file, rotates its text and writes the result to
the output file. Progress is reported as a stream of events so callers decide
how (or whether) to display it:

    pipeline = FilePipeline(invocation)
    for event in pipeline.stages():
        reporter.handle(event)

I/O and decoding errors are not caught here; they propagate to the caller.
"""

import locale
import sys
from collections.abc import Generator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO

from .cipher import rot13
from .config import Invocation

# Width of the "working" indicator that "complete!" replaces in place
_WORKING = "working"


class Stage(Enum):
    """Pipeline stages, in execution order."""

    READ = "read"
    TRANSFORM = "transform"
    WRITE = "write"


class EventType(Enum):
    """Types of events yielded by the pipeline."""

    STAGE_STARTED = "stage_started"
    STAGE_COMPLETE = "stage_complete"
    CONTENTS = "contents"  # Buffer read from or written to a file


@dataclass
class PipelineEvent:
    """Event yielded by the pipeline.

    Attributes:
        type: The type of event.
        stage: Stage the event belongs to.
        label: Display name of the file involved (empty for TRANSFORM).
        size: Buffer size in bytes (for CONTENTS).
        contents: Buffer text (for CONTENTS).
    """

    type: EventType
    stage: Stage
    label: str = ""
    size: int | None = None
    contents: str | None = None


def get_file_name(path: str) -> str:
    """Get a display name for a path: its file name minus the last extension.

    A leading dot does not start an extension (".bashrc" stays whole) but a
    trailing one does ("foo." gives "foo"). Falls back to the path unchanged
    when it has no file name component or the name is not valid Unicode.
    """
    name = Path(path).name
    if name in ("", ".."):
        return path
    dot = name.rfind(".")
    stem = name[:dot] if dot > 0 else name
    try:
        stem.encode("utf-8")
    except UnicodeEncodeError:
        return path
    return stem


class FilePipeline:
    """Runs the read, transform and write stages for one invocation."""

    def __init__(self, invocation: Invocation, encoding: str | None = None) -> None:
        """Initialize the pipeline.

        Args:
            invocation: Paths to read from and write to.
            encoding: Text encoding for both files. Defaults to the host's
                preferred encoding.
        """
        self.invocation = invocation
        self.encoding = encoding or locale.getpreferredencoding(False)
        self.in_file_name = get_file_name(invocation.in_file_path)
        self.out_file_name = get_file_name(invocation.out_file_path)

    def stages(self) -> Generator[PipelineEvent, None, str]:
        """Run the pipeline, yielding progress events.

        Returns:
            The transformed text (as the generator's return value).

        Raises:
            OSError: If the input cannot be read or the output cannot be written.
            UnicodeDecodeError: If the input is not valid text.
        """
        yield PipelineEvent(EventType.STAGE_STARTED, Stage.READ, self.in_file_name)
        with open(self.invocation.in_file_path, encoding=self.encoding, newline="") as f:
            contents = f.read()
        yield PipelineEvent(EventType.STAGE_COMPLETE, Stage.READ, self.in_file_name)
        yield self._contents_event(Stage.READ, self.in_file_name, contents)

        yield PipelineEvent(EventType.STAGE_STARTED, Stage.TRANSFORM)
        new_contents = rot13(contents)
        yield PipelineEvent(EventType.STAGE_COMPLETE, Stage.TRANSFORM)

        yield PipelineEvent(EventType.STAGE_STARTED, Stage.WRITE, self.out_file_name)
        with open(self.invocation.out_file_path, "w", encoding=self.encoding, newline="") as f:
            f.write(new_contents)
        yield PipelineEvent(EventType.STAGE_COMPLETE, Stage.WRITE, self.out_file_name)
        yield self._contents_event(Stage.WRITE, self.out_file_name, new_contents)

        return new_contents

    def run(self) -> str:
        """Run all stages without reporting.

        Returns:
            The transformed text.
        """
        gen = self.stages()
        while True:
            try:
                next(gen)
            except StopIteration as stop:
                return stop.value

    def _contents_event(self, stage: Stage, label: str, contents: str) -> PipelineEvent:
        size = len(contents.encode(self.encoding))
        return PipelineEvent(EventType.CONTENTS, stage, label, size=size, contents=contents)


class ConsoleReporter:
    """Renders pipeline events as verbose console output."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._pending: str | None = None

    def handle(self, event: PipelineEvent) -> None:
        """Write the output for a single event."""
        if event.type == EventType.STAGE_STARTED:
            self._pending = _describe(event)
            self.stream.write(f"{self._pending}... {_WORKING}")
            self.stream.flush()
        elif event.type == EventType.STAGE_COMPLETE:
            if self.stream.isatty():
                # Backspace over "working" so "complete!" overwrites it
                self.stream.write("\b" * len(_WORKING) + "complete!\n")
            else:
                self.stream.write(f"\n{self._pending}... complete!\n")
            self._pending = None
        elif event.type == EventType.CONTENTS:
            print(f"Size of {event.label}: {event.size} bytes", file=self.stream)
            print(f"Contents of {event.label}:\n{event.contents}", file=self.stream)

    def interrupt(self) -> None:
        """End a "working" line left open by a failed stage."""
        if self._pending is not None:
            self.stream.write("\n")
            self.stream.flush()
            self._pending = None


def _describe(event: PipelineEvent) -> str:
    if event.stage == Stage.READ:
        return f"Reading {event.label}"
    if event.stage == Stage.WRITE:
        return f"Writing to {event.label}"
    return "Encrypting/decrypting text"


def run(
    in_file_path: str,
    out_file_path: str,
    verbose: bool = False,
    reporter: ConsoleReporter | None = None,
) -> None:
    """Encrypt/decrypt a file into another file.

    Args:
        in_file_path: File to read.
        out_file_path: File to create or overwrite.
        verbose: If True, print progress and file contents.
        reporter: Reporter for verbose output. Defaults to one on stdout.

    Raises:
        OSError: If reading or writing fails.
        UnicodeDecodeError: If the input is not valid text.
    """
    pipeline = FilePipeline(Invocation(in_file_path, out_file_path, verbose))
    if not verbose:
        pipeline.run()
        return

    reporter = reporter if reporter is not None else ConsoleReporter()
    for event in pipeline.stages():
        reporter.handle(event)
