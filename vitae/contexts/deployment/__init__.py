"""
Deployment Context

Responsibilities:
- Stages the built page into the deployable build directory
- Validates the build directory and reports the upload command

Owns: build/ directory, remote-copy command
Never: Rebuilds the page
"""

from vitae.contexts.deployment.deployer import (
    DeployConfig,
    DeployResult,
    build_scp_command,
    check_build_dir,
    deploy,
)
from vitae.contexts.deployment.stager import stage_build

__all__ = [
    "DeployConfig",
    "DeployResult",
    "build_scp_command",
    "check_build_dir",
    "deploy",
    "stage_build",
]
