"""
File operations for Codebase Audit.

Every read and write goes through these helpers so that OS-level failures
surface as FileAccessError and can be recovered by the caller.
"""

from pathlib import Path

from .exceptions import FileAccessError


def safe_read_file(
    filepath: Path,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """
    Read a text file.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def safe_write_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write a text file, creating parent directories as needed.

    Raises:
        FileAccessError: If file cannot be written
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")


def file_exists(filepath: Path) -> bool:
    """True if ``filepath`` is an existing regular file."""
    try:
        return filepath.is_file()
    except OSError:
        return False
