from __future__ import annotations

import itertools
import logging
import os
import stat
import subprocess
import tempfile
from typing import Optional, Protocol, Sequence, TextIO

from . import config
from .commands import exit_command, prefix_command
from .errors import StartupError, TransportError

logger = logging.getLogger(__name__)

# Seconds to wait for XMGR to exit after "exit" before terminating it.
SHUTDOWN_TIMEOUT = 5.0


class Transport(Protocol):
    """Where command lines go. One ``send`` per line, in order."""

    def send(self, line: str) -> None: ...

    def close(self) -> None: ...

    def detach(self) -> None: ...

    @property
    def is_running(self) -> bool: ...


class StreamTransport:
    """Write lines to an open text stream (stdout, a file, ``io.StringIO``).

    Useful for dry runs and for generating XMGR batch files. Set
    ``command_prefix="@"`` to produce anonymous-pipe style output.
    """

    def __init__(
        self,
        stream: TextIO,
        *,
        command_prefix: Optional[str] = None,
        close_stream: bool = False,
    ):
        self._stream: Optional[TextIO] = stream
        self.command_prefix = command_prefix
        self._close_stream = close_stream

    @property
    def is_running(self) -> bool:
        return self._stream is not None

    def send(self, line: str) -> None:
        if self._stream is None:
            raise TransportError("Stream transport is closed")
        try:
            self._stream.write(prefix_command(line, self.command_prefix) + "\n")
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise TransportError(f"Can't write to stream: {e}") from e

    def close(self) -> None:
        if self._stream is not None and self._close_stream:
            self._stream.close()
        self._stream = None

    def detach(self) -> None:
        self.close()


class _ProcessTransport:
    """Shared lifecycle for transports that own an XMGR child process."""

    command_prefix: Optional[str] = None

    def __init__(self) -> None:
        self._proc: Optional[subprocess.Popen] = None
        self._pipe: Optional[TextIO] = None

    @property
    def pid(self) -> Optional[int]:
        return self._proc.pid if self._proc is not None else None

    @property
    def is_running(self) -> bool:
        return self._proc is not None and self._proc.poll() is None

    def _spawn(self, argv: Sequence[str], **popen_kwargs) -> subprocess.Popen:
        try:
            proc = subprocess.Popen(list(argv), **popen_kwargs)
        except OSError as e:
            raise StartupError(f"Can't start {argv[0]}: {e}") from e
        logger.info("Started %s with pid %d", argv[0], proc.pid)
        return proc

    @staticmethod
    def _check_started(proc: subprocess.Popen, argv: Sequence[str], pause: float) -> None:
        # There is no handshake, so give the child a moment to fall over.
        try:
            proc.wait(timeout=pause)
        except subprocess.TimeoutExpired:
            return
        raise StartupError(
            f"{argv[0]} exited with status {proc.returncode} during startup"
        )

    def send(self, line: str) -> None:
        if self._pipe is None:
            raise TransportError("Not attached to an XMGR process")
        text = prefix_command(line, self.command_prefix)
        logger.debug("-> %s", text)
        try:
            self._pipe.write(text + "\n")
            self._pipe.flush()
        except (OSError, ValueError) as e:
            raise TransportError(f"Can't write to XMGR: {e}") from e

    def _close_pipe(self) -> None:
        if self._pipe is None:
            return
        try:
            self._pipe.close()
        except OSError as e:
            logger.warning("Can't release XMGR pipe: %s", e)
        finally:
            self._pipe = None

    def detach(self) -> None:
        """Close the pipe but leave XMGR running for the user."""
        self._close_pipe()
        self._proc = None
        self._cleanup()

    def close(self) -> None:
        """Ask XMGR to exit, close the pipe and reap the process."""
        if self._pipe is not None:
            try:
                self.send(exit_command())
            except TransportError as e:
                logger.debug("XMGR already gone: %s", e)
        self._close_pipe()

        proc, self._proc = self._proc, None
        if proc is not None:
            try:
                proc.wait(timeout=SHUTDOWN_TIMEOUT)
            except subprocess.TimeoutExpired:
                logger.warning("XMGR (pid %d) did not exit, terminating", proc.pid)
                proc.terminate()
                proc.wait()
        self._cleanup()

    def _abort(self) -> None:
        """Kill a child that never became usable."""
        proc, self._proc = self._proc, None
        if proc is not None and proc.poll() is None:
            logger.warning("Terminating %d after failed startup", proc.pid)
            proc.terminate()
            proc.wait()
        self._cleanup()

    def _cleanup(self) -> None:
        pass


class AnonymousPipeTransport(_ProcessTransport):
    """XMGR reading commands from its stdin (``xmgr -pipe``).

    Commands need an ``@`` prefix on this pipe; data lines are sent bare.
    XMGR does not respond to its buttons until the pipe is closed.
    """

    command_prefix = "@"

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        *,
        startup_pause: Optional[float] = None,
    ):
        super().__init__()
        argv = list(command) if command else [config.XMGR_EXECUTABLE, "-pipe", "-noask"]
        pause = config.STARTUP_PAUSE if startup_pause is None else startup_pause

        self._proc = self._spawn(argv, stdin=subprocess.PIPE, text=True, bufsize=1)
        try:
            self._check_started(self._proc, argv, pause)
        except StartupError:
            self._proc.stdin.close()
            self._proc = None
            raise
        self._pipe = self._proc.stdin


class NamedPipeTransport(_ProcessTransport):
    """XMGR reading commands from a FIFO (``xmgr -npipe <fifo>``).

    XMGR stays fully interactive. Point data must be sent as ``POINT``
    commands, so only XY data can be plotted. ``"{fifo}"`` in ``command``
    is replaced by the FIFO path.
    """

    _counter = itertools.count(1)

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        *,
        fifo_path: Optional[str] = None,
        startup_pause: Optional[float] = None,
    ):
        super().__init__()
        self.fifo_path = fifo_path or os.path.join(
            tempfile.gettempdir(), f"xmgr_fifo{os.getpid()}_{next(self._counter)}"
        )
        template = (
            list(command)
            if command
            else [config.XMGR_EXECUTABLE, "-noask", "-npipe", "{fifo}", "-timer", "900"]
        )
        argv = [self.fifo_path if a == "{fifo}" else a for a in template]
        pause = config.STARTUP_PAUSE if startup_pause is None else startup_pause

        self._make_fifo()
        try:
            self._proc = self._spawn(argv)
            self._check_started(self._proc, argv, pause)
        except StartupError:
            self._proc = None
            self._cleanup()
            raise

        # Blocks until XMGR opens its end.
        try:
            self._pipe = open(self.fifo_path, "w", buffering=1)
        except OSError as e:
            self._abort()
            raise StartupError(f"Can't open named pipe {self.fifo_path}: {e}") from e
        except KeyboardInterrupt:
            self._abort()
            raise
        logger.debug("Opened named pipe %s", self.fifo_path)

    def _make_fifo(self) -> None:
        try:
            if stat.S_ISFIFO(os.stat(self.fifo_path).st_mode):
                return
            os.unlink(self.fifo_path)
        except FileNotFoundError:
            pass
        logger.debug("Making named pipe %s", self.fifo_path)
        try:
            os.mkfifo(self.fifo_path, 0o600)
        except (OSError, AttributeError) as e:
            raise StartupError(f"Can't create named pipe {self.fifo_path}: {e}") from e

    def _cleanup(self) -> None:
        try:
            os.unlink(self.fifo_path)
        except FileNotFoundError:
            pass


def launch() -> _ProcessTransport:
    """Start XMGR on a named or anonymous pipe, as :data:`config.NAMED_PIPE` says."""
    if config.NAMED_PIPE:
        return NamedPipeTransport()
    return AnonymousPipeTransport()
