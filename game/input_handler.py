"""
Input Handler - reads single key presses and maps them to commands
"""

import sys
import termios
import tty
from contextlib import contextmanager

from utils.constants import Command, KEY_BINDINGS


def command_from_key(key):
    """
    Map a raw key to a Command

    Empty input means stdin is exhausted and is treated as QUIT;
    anything unbound is UNKNOWN.
    """
    if key == '':
        return Command.QUIT
    return KEY_BINDINGS.get(key.lower(), Command.UNKNOWN)


@contextmanager
def raw_terminal(stream=None):
    """
    Put the terminal in cbreak mode (no line buffering, no echo)

    Previous settings are restored on exit, including on exceptions.
    Does nothing when the stream isn't a TTY.
    """
    stream = stream if stream is not None else sys.stdin
    if not stream.isatty():
        yield stream
        return

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        new = termios.tcgetattr(fd)
        new[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSADRAIN, new)
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


class KeyboardInput:
    """
    Blocking one-key-at-a-time command reader
    """
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin

    def read_key(self):
        """
        Read one key ('' at end of input)

        Reads a single byte from the underlying binary buffer when there is
        one; bytes that aren't valid UTF-8 (e.g. meta-8bit Alt+key) decode
        to U+FFFD and map to UNKNOWN.
        """
        buffer = getattr(self.stream, "buffer", None)
        if buffer is None:
            return self.stream.read(1)
        return buffer.read(1).decode("utf-8", errors="replace")

    def next_command(self):
        """Block until a key arrives and return its Command"""
        return command_from_key(self.read_key())
