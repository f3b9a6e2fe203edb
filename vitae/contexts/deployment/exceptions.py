"""Exceptions raised while staging or deploying the build."""

from pathlib import Path

from vitae.utils.exceptions import VitaeError


class BuildDirectoryNotFoundError(VitaeError):
    """Raised when the directory to deploy does not exist."""

    def __init__(self, build_dir: Path):
        self.build_dir = build_dir
        super().__init__(
            f"Build directory not found: {build_dir}. Run \"vitae-build run\" and "
            f"\"vitae-build stage\" first."
        )


class OutputDirectoryNotFoundError(VitaeError):
    """Raised when there is no built page to stage."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        super().__init__(f"Output directory not found: {output_dir}. Run \"vitae-build run\" first.")
