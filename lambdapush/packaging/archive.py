"""Zip the compiled binary in memory under Lambda's expected entry name.

Lambda unpacks the archive and execs the entry directly, so two details
are load-bearing:
  - entry name: "bootstrap" for arm64 (provided.al2), "main" for x86_64.
    A wrong name deploys fine and then fails on every invocation.
  - permissions: external_attr carries 0o777 in the high 16 bits, and
    create_system must be 3 (Unix) or the bits are ignored on extraction.
"""

import io
import logging
import stat
import zipfile
from pathlib import Path

from lambdapush.errors import PackagingError
from lambdapush.packaging.types import PackagedArchive
from lambdapush.target.types import Architecture

logger = logging.getLogger(__name__)

ENTRY_MODE = 0o777

# Fixed timestamp so the same binary always zips to the same bytes
_EPOCH = (1980, 1, 1, 0, 0, 0)

_UNIX_SYSTEM = 3


def entry_name_for(architecture: Architecture) -> str:
    return architecture.entry_name


def _entry_info(name: str) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(filename=name, date_time=_EPOCH)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.create_system = _UNIX_SYSTEM
    info.external_attr = (stat.S_IFREG | ENTRY_MODE) << 16
    return info


def package_artifact(
    artifact_path: Path,
    architecture: Architecture = Architecture.X86_64,
) -> PackagedArchive:
    """Build a single-entry deflate zip of artifact_path, entirely in memory.

    Raises PackagingError if the binary cannot be read or the zip cannot
    be written.
    """
    artifact_path = Path(artifact_path)
    entry_name = entry_name_for(architecture)

    try:
        binary = artifact_path.read_bytes()
    except OSError as exc:
        raise PackagingError(f"Cannot read compiled binary {artifact_path}: {exc}") from exc

    buffer = io.BytesIO()
    try:
        # Closing the writer flushes the central directory; the buffer is
        # only a valid zip after the with-block exits.
        with zipfile.ZipFile(buffer, mode="w") as archive:
            archive.writestr(_entry_info(entry_name), binary)
    except (OSError, zipfile.LargeZipFile, ValueError) as exc:
        raise PackagingError(f"Cannot write zip archive: {exc}") from exc

    packaged = PackagedArchive(
        content=buffer.getvalue(),
        entry_name=entry_name,
        architecture=architecture,
    )
    logger.info(
        "Packaged %s as '%s' (%d -> %d bytes)",
        artifact_path, entry_name, len(binary), packaged.size,
    )
    return packaged


def read_entry(content: bytes) -> tuple[str, int, bytes]:
    """Return (name, permission bits, data) of the archive's single entry.

    Raises PackagingError if the archive is corrupt or holds more than one entry.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(content)) as archive:
            infos = archive.infolist()
            if len(infos) != 1:
                raise PackagingError(f"Expected a single entry, found {len(infos)}")
            info = infos[0]
            data = archive.read(info)
    except zipfile.BadZipFile as exc:
        raise PackagingError(f"Corrupt zip archive: {exc}") from exc

    mode = stat.S_IMODE(info.external_attr >> 16)
    return info.filename, mode, data
