"""Run external generator commands, streaming their output to a log sink.

``CommandRunner.run()`` blocks the caller until the child exits. Two reader
threads forward stdout and stderr chunks to the sink as they arrive.
"""

import codecs
import os
import shlex
import shutil
import subprocess
import sys
import threading
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from nextplus.errors import ProcessExitError, ProcessLaunchError

_CHUNK_SIZE = 4096
_TERMINATE_TIMEOUT = 5.0


@dataclass(frozen=True)
class CommandInvocation:
    """One external command: executable, arguments and working directory."""

    executable: str
    args: List[str] = field(default_factory=list)
    cwd: str = "."
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        return self.label or self.executable

    @property
    def command_line(self) -> str:
        return shlex.join([self.executable, *self.args])


class LogSink:
    """Visible log surface for command output, optionally teed to a file.

    Writes are serialized so chunks from stdout and stderr keep their
    arrival order, and every write is flushed immediately.
    """

    def __init__(self, stream: Optional[TextIO] = None, log_file: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr
        self.log_file = log_file
        self._lock = threading.Lock()

    def append(self, text: str) -> None:
        with self._lock:
            for target in self._targets():
                target.write(text)
                target.flush()

    def append_line(self, text: str) -> None:
        self.append(text + "\n")

    def write_header(self, invocation: CommandInvocation) -> None:
        self.append_line(
            f"> ({invocation.display_label}) {invocation.command_line} "
            f"(cwd: {invocation.cwd})"
        )

    def _targets(self):
        if self.log_file is None:
            return (self.stream,)
        return (self.stream, self.log_file)


def _forward_pipe(pipe, sink: LogSink):
    """Decode pipe chunks incrementally and forward them to the sink."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        chunk = pipe.read1(_CHUNK_SIZE) if hasattr(pipe, "read1") else pipe.read(_CHUNK_SIZE)
        if not chunk:
            break
        text = decoder.decode(chunk)
        if text:
            sink.append(text)
    tail = decoder.decode(b"", final=True)
    if tail:
        sink.append(tail)


def _resolve_executable(invocation: CommandInvocation) -> str:
    resolved = shutil.which(invocation.executable)
    if resolved is None:
        raise ProcessLaunchError(
            invocation.command_line,
            FileNotFoundError(f"executable not found on PATH: {invocation.executable}"),
        )
    return resolved


class CommandRunner:
    """Runs one CommandInvocation at a time against a LogSink."""

    def __init__(self, sink: Optional[LogSink] = None, popen=subprocess.Popen):
        self.sink = sink if sink is not None else LogSink()
        self._popen = popen

    def run(self, invocation: CommandInvocation) -> None:
        """Run *invocation* to completion.

        Raises:
            ProcessLaunchError: the executable is missing or could not start.
            ProcessExitError: the process exited with a non-zero code.
            KeyboardInterrupt: the user pressed Ctrl+C; the child is terminated first.
        """
        executable = _resolve_executable(invocation)
        self.sink.write_header(invocation)

        try:
            process = self._popen(
                [executable, *invocation.args],
                cwd=invocation.cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                start_new_session=os.name == "posix",
            )
        except OSError as exc:
            raise ProcessLaunchError(invocation.command_line, exc) from exc

        readers = [
            threading.Thread(target=_forward_pipe, args=(process.stdout, self.sink), daemon=True),
            threading.Thread(target=_forward_pipe, args=(process.stderr, self.sink), daemon=True),
        ]
        for reader in readers:
            reader.start()

        try:
            process.wait()
        except KeyboardInterrupt:
            self._stop(process, invocation.display_label, readers)
            raise

        for reader in readers:
            reader.join()

        if process.returncode != 0:
            raise ProcessExitError(invocation.display_label, process.returncode)

    def _stop(self, process, label, readers):
        """Terminate an interrupted child, killing it if it ignores SIGTERM."""
        print(f"\nInterrupted. Terminating {label}...", file=self.sink.stream)
        process.terminate()
        try:
            process.wait(timeout=_TERMINATE_TIMEOUT)
        except subprocess.TimeoutExpired:
            print(f"Force-killing {label}...", file=self.sink.stream)
            process.kill()
            process.wait()
        for reader in readers:
            reader.join(timeout=_TERMINATE_TIMEOUT)
