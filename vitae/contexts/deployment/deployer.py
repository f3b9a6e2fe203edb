"""
Deployment Reporting

Checks that the build directory exists and prints the scp command that would
upload it. The command is only executed when RUN_DEPLOY_COMMAND is switched on
by editing this module; by default deploying is a dry run.

Environment variables:
    DEPLOY_HOST  SSH connection string (default: user@example.com)
    DEPLOY_PATH  Remote directory path (default: /var/www/html/resume)
"""

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vitae.contexts.deployment.exceptions import BuildDirectoryNotFoundError
from vitae.contexts.deployment.logger import _log_debug, _log_error, _log_info, _log_success
from vitae.utils.config import load_environment

DEFAULT_REMOTE_HOST = "user@example.com"
DEFAULT_REMOTE_PATH = "/var/www/html/resume"

# Set to True to actually run the scp command
RUN_DEPLOY_COMMAND = False


@dataclass(frozen=True)
class DeployConfig:
    """
    Immutable deploy settings.

    Attributes:
        build_dir: Local directory to upload
        remote_host: SSH connection string
        remote_path: Remote directory
        logs_path: Base directory for log files (None for console only)
    """

    build_dir: Path
    remote_host: str = DEFAULT_REMOTE_HOST
    remote_path: str = DEFAULT_REMOTE_PATH
    logs_path: Optional[Path] = None

    @classmethod
    def from_env(cls, root: Optional[Path] = None) -> "DeployConfig":
        root = load_environment(root)
        logs_path = os.getenv("LOGS_PATH")

        return cls(
            build_dir=root / "build",
            remote_host=os.getenv("DEPLOY_HOST") or DEFAULT_REMOTE_HOST,
            remote_path=os.getenv("DEPLOY_PATH") or DEFAULT_REMOTE_PATH,
            logs_path=Path(logs_path) if logs_path else None,
        )

    @property
    def target(self) -> str:
        return f"{self.remote_host}:{self.remote_path}"


@dataclass
class DeployResult:
    """
    Result of deploy().

    Attributes:
        success: False only when an enabled upload failed
        command: The scp command that was reported
        executed: Whether the command was actually run
        error: Failure message from the upload
    """

    success: bool
    command: str
    executed: bool = False
    error: Optional[str] = None


def check_build_dir(config: DeployConfig) -> Path:
    """
    Precheck: the build directory must exist before any command is built.

    Raises:
        BuildDirectoryNotFoundError: If it does not
    """
    if not config.build_dir.is_dir():
        raise BuildDirectoryNotFoundError(config.build_dir)
    return config.build_dir


def build_scp_command(config: DeployConfig) -> str:
    """
    Shell command that uploads the build directory contents.

    Example:
        scp -r /srv/resume/build/* user@example.com:/var/www/html/resume
    """
    return f"scp -r {config.build_dir}/* {config.target}"


def deploy(config: DeployConfig, execute: Optional[bool] = None) -> DeployResult:
    """
    Validate the build directory and report (optionally run) the upload command.

    Args:
        config: Deploy settings
        execute: Run the command; defaults to RUN_DEPLOY_COMMAND

    Returns:
        DeployResult; a failed upload is reported here rather than raised

    Raises:
        BuildDirectoryNotFoundError: If the build directory is missing
    """
    if execute is None:
        execute = RUN_DEPLOY_COMMAND

    check_build_dir(config)
    _log_info(f"Source: {config.build_dir}")
    _log_info(f"Target: {config.target}")

    command = build_scp_command(config)
    _log_debug(f"Deploy command: {command}")

    if not execute:
        return DeployResult(success=True, command=command)

    # The glob in the command needs a shell to expand
    try:
        subprocess.run(command, shell=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        _log_error(f"Deployment failed: {e}")
        return DeployResult(success=False, command=command, executed=True, error=str(e))

    _log_success(f"Deployed to {config.target}")
    return DeployResult(success=True, command=command, executed=True)
