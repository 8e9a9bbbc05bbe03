"""Terminal detection for session streams."""

import os
import re
import sys
from typing import Any

_FILE_TYPE_PIPE = 0x0003
_FILE_NAME_INFO = 2
_MAX_PATH = 260

# \cygwin-<hex>-pty<N>-from-master, \msys-<hex>-pty<N>-to-master, ...
_CYGWIN_PTY = re.compile(r"^\\(?:cygwin|msys)-[0-9a-fA-F]+-pty\d+-(?:from|to)-master")


def _fileno(stream: Any) -> int:
    """Return the OS file descriptor behind a stream, or -1 if there is none."""
    fileno = getattr(stream, "fileno", None)
    if fileno is None:
        return -1
    try:
        return fileno()
    except (OSError, ValueError):
        # io.UnsupportedOperation for in-memory buffers, ValueError when closed
        return -1


def _pipe_name(fd: int) -> str:
    """Return the name of the pipe behind a Windows file descriptor."""
    import ctypes
    import msvcrt
    from ctypes import wintypes

    try:
        handle = msvcrt.get_osfhandle(fd)
    except OSError:
        return ""

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    if kernel32.GetFileType(wintypes.HANDLE(handle)) != _FILE_TYPE_PIPE:
        return ""

    class FileNameInfo(ctypes.Structure):
        _fields_ = [
            ("FileNameLength", wintypes.DWORD),
            ("FileName", wintypes.WCHAR * _MAX_PATH),
        ]

    info = FileNameInfo()
    ok = kernel32.GetFileInformationByHandleEx(
        wintypes.HANDLE(handle),
        _FILE_NAME_INFO,
        ctypes.byref(info),
        ctypes.sizeof(info),
    )
    if not ok:
        return ""
    return info.FileName[: info.FileNameLength // ctypes.sizeof(wintypes.WCHAR)]


def is_cygwin_terminal(fd: int) -> bool:
    """Report whether a descriptor is a Cygwin or MSYS pseudo terminal pipe."""
    if sys.platform != "win32" or fd < 0:
        return False
    return bool(_CYGWIN_PTY.match(_pipe_name(fd)))


def is_terminal(stream: Any) -> bool:
    """
    Report whether a stream is attached to an interactive terminal.

    Streams without an OS file descriptor are never terminals, whatever they
    contain. The check is made against the live descriptor on every call.
    """
    fd = _fileno(stream)
    if fd < 0:
        return False
    try:
        if os.isatty(fd):
            return True
    except OSError:
        return False
    return is_cygwin_terminal(fd)
