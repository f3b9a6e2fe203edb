"""Output management for the built page."""

from dataclasses import dataclass
from pathlib import Path

from vitae.contexts.rendering.exceptions import OutputWriteError
from vitae.contexts.rendering.logger import _log_debug


@dataclass(frozen=True)
class WrittenFile:
    path: Path
    size_bytes: int

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024


def write_output(html: str, output_path: Path) -> WrittenFile:
    """
    Write the page as UTF-8, creating parent directories as needed.

    Not atomic: a failure part-way may leave a truncated file behind.

    Raises:
        OutputWriteError: If the directory cannot be created or the file cannot be written
    """
    data = html.encode("utf-8")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise OutputWriteError(output_path, e) from e

    _log_debug(f"Wrote {len(data)} bytes to {output_path}")
    return WrittenFile(path=output_path, size_bytes=len(data))
