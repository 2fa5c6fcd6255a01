"""Running protoc and loading the FileDescriptorSet it produces."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Iterable, Sequence, Union

from google.protobuf import descriptor_pb2
from google.protobuf.message import DecodeError

__all__ = [
    "ProtocError",
    "error_message_protoc_not_found",
    "protoc_from_env",
    "protoc_include_from_env",
    "load_descriptor_set",
    "write_file_if_changed",
]

_log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ProtocError(OSError):
    """Raised when protoc cannot be run or its output cannot be used."""


def error_message_protoc_not_found() -> str:
    """The message reported when the protoc executable cannot be found."""
    error_msg = (
        "Could not find `protoc`. If `protoc` is installed, try setting the `PROTOC` "
        "environment variable to the path of the `protoc` binary."
    )
    if sys.platform == "darwin":
        os_specific_hint = "To install it on macOS, run `brew install protobuf`."
    elif sys.platform.startswith("linux"):
        os_specific_hint = "To install it on Debian, run `apt-get install protobuf-compiler`."
    else:
        os_specific_hint = (
            "Try installing `protobuf-compiler` or `protobuf` using your package manager."
        )
    download_msg = "It is also available from the Protocol Buffers release downloads."
    return f"{error_msg} {os_specific_hint} {download_msg}"


def protoc_from_env() -> Path:
    """The protoc executable named by the PROTOC variable, or plain ``protoc``."""
    return Path(os.environ.get("PROTOC") or "protoc")


def protoc_include_from_env() -> Path | None:
    """The Protobuf include directory named by PROTOC_INCLUDE, if it is set.

    Raises ProtocError when the variable points to something that is not an
    existing directory.
    """
    value = os.environ.get("PROTOC_INCLUDE")
    if value is None:
        return None
    protoc_include = Path(value)
    if not protoc_include.exists():
        raise ProtocError(
            "PROTOC_INCLUDE environment variable points to non-existent directory "
            f"({protoc_include})"
        )
    if not protoc_include.is_dir():
        raise ProtocError(
            "PROTOC_INCLUDE environment variable points to a non-directory file "
            f"({protoc_include})"
        )
    return protoc_include


def _protoc_command(
    protos: Iterable[PathLike],
    includes: Iterable[PathLike],
    protoc_executable: Path,
    output: Path,
    skip_source_info: bool,
    protoc_args: Iterable[str],
) -> list[str]:
    cmd = [str(protoc_executable), "--include_imports"]
    if not skip_source_info:
        cmd.append("--include_source_info")
    cmd += ["-o", str(output)]

    for include in map(Path, includes):
        if include.exists():
            cmd += ["-I", str(include)]
        else:
            _log.debug("ignoring %s since it does not exist.", include)

    # The built-in include path goes after the user's so they can override it.
    protoc_include = protoc_include_from_env()
    if protoc_include is not None:
        cmd += ["-I", str(protoc_include)]

    cmd.extend(str(arg) for arg in protoc_args)
    cmd.extend(str(proto) for proto in protos)
    return cmd


def _run_protoc(cmd: list[str], protoc_executable: Path) -> None:
    _log.debug("Running: %s", cmd)
    try:
        result = subprocess.run(cmd, capture_output=True, check=False)
    except FileNotFoundError as err:
        raise ProtocError(err.errno, error_message_protoc_not_found()) from err
    except OSError as err:
        raise ProtocError(
            f"failed to invoke protoc (path: {protoc_executable}): {err}"
        ) from err
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise ProtocError(f"protoc failed: {stderr}")


def _read_descriptor_set(path: Path) -> descriptor_pb2.FileDescriptorSet:
    try:
        buf = path.read_bytes()
    except OSError as err:
        raise ProtocError(
            f"unable to open file_descriptor_set_path: {path}, OS: {err}"
        ) from err
    descriptor_set = descriptor_pb2.FileDescriptorSet()
    try:
        descriptor_set.ParseFromString(buf)
    except DecodeError as err:
        raise ProtocError(f"invalid FileDescriptorSet: {err}") from err
    return descriptor_set


def load_descriptor_set(
    protos: Sequence[PathLike],
    includes: Sequence[PathLike],
    protoc_executable: PathLike | None = None,
    file_descriptor_set_path: PathLike | None = None,
    skip_protoc_run: bool = False,
    skip_source_info: bool = False,
    protoc_args: Iterable[str] = (),
) -> descriptor_pb2.FileDescriptorSet:
    """Compile .proto files with protoc and load the resulting descriptor set.

    With ``skip_protoc_run`` the set is read from ``file_descriptor_set_path``
    without running protoc. Without a descriptor set path, protoc writes into
    a temporary directory. Raises ProtocError on any failure.
    """
    if file_descriptor_set_path is None and skip_protoc_run:
        raise ProtocError("file_descriptor_set_path is required with skip_protoc_run")

    def run_and_read(output: Path) -> descriptor_pb2.FileDescriptorSet:
        if not skip_protoc_run:
            executable = (
                Path(protoc_executable) if protoc_executable is not None else protoc_from_env()
            )
            cmd = _protoc_command(
                protos, includes, executable, output, skip_source_info, protoc_args
            )
            _run_protoc(cmd, executable)
        return _read_descriptor_set(output)

    if file_descriptor_set_path is not None:
        return run_and_read(Path(file_descriptor_set_path))

    with tempfile.TemporaryDirectory(prefix="prost-build") as tmp:
        return run_and_read(Path(tmp) / "prost-descriptor-set")


def write_file_if_changed(path: PathLike, content: bytes) -> bool:
    """Write ``content`` to ``path`` unless the file already holds exactly that.

    Returns True when the file was written.
    """
    target = Path(path)
    try:
        if target.read_bytes() == content:
            _log.debug("unchanged: %s", target)
            return False
    except OSError:
        pass
    _log.debug("writing: %s", target)
    target.write_bytes(content)
    return True