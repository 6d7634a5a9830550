"""File operation utilities"""

import shutil
from pathlib import Path


def copy_file(src: Path, dst: Path, chunk_size: int = 1024 * 1024) -> int:
    """
    Copy file contents byte for byte, then its permission bits

    Args:
        src: Source file
        dst: Destination file (overwritten if present)
        chunk_size: Copy chunk size

    Returns:
        Number of bytes copied

    Raises:
        OSError: If the source cannot be read or the destination written
    """
    bytes_copied = 0

    with open(src, 'rb') as fsrc:
        with open(dst, 'wb') as fdst:
            while chunk := fsrc.read(chunk_size):
                fdst.write(chunk)
                bytes_copied += len(chunk)

    # Executables must stay executable
    shutil.copymode(src, dst)
    return bytes_copied


def path_exists(path: Path) -> bool:
    """
    Check whether anything occupies ``path``, dangling symlinks included

    Args:
        path: Path to check

    Returns:
        True if a file, directory or symlink exists at path
    """
    return path.is_symlink() or path.exists()


def remove_if_exists(path: Path) -> bool:
    """
    Remove a file or symlink, ignoring a missing one

    Args:
        path: Path to remove

    Returns:
        True if something was removed, False if nothing was there

    Raises:
        OSError: If the path exists but cannot be removed
    """
    try:
        path.unlink()
        return True
    except FileNotFoundError:
        return False
