"""
Resume Deploy CLI

Prints the scp command that uploads build/ to the web server. The command is
only run when RUN_DEPLOY_COMMAND is enabled in vitae/contexts/deployment/deployer.py.

Examples:\n

    vitae-deploy                                   # Show the deploy command

    DEPLOY_HOST=me@myserver.com vitae-deploy       # Use a different host
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vitae.contexts.deployment import DeployConfig, deploy
from vitae.contexts.deployment.logger import setup_deployment_logger
from vitae.utils.exceptions import VitaeError
from vitae.utils.logger import session_log_dir

app = typer.Typer(
    help="Report (and optionally run) the command that deploys the built resume",
    add_completion=False,
)


def print_instructions() -> None:
    typer.echo("\nTo configure deployment:")
    typer.echo("   1. Set DEPLOY_HOST (e.g., export DEPLOY_HOST=user@yourserver.com)")
    typer.echo("   2. Set DEPLOY_PATH (e.g., export DEPLOY_PATH=/var/www/html/resume)")
    typer.echo("   3. Set RUN_DEPLOY_COMMAND = True in vitae/contexts/deployment/deployer.py")
    typer.echo("   4. Run: vitae-deploy")


@app.command()
def deploy_command(
    root: Annotated[
        Optional[Path],
        typer.Option(
            "--root",
            "-r",
            help="Project root containing build/ (default: VITAE_ROOT or cwd)",
            file_okay=False,
        ),
    ] = None,
):
    """
    Check build/ exists and print the scp command that deploys it.

    Examples:\n

        $ vitae-deploy

        $ vitae-deploy --root ~/cv
    """
    config = DeployConfig.from_env(root)
    setup_deployment_logger(session_log_dir(config.logs_path, "deploy"), phase="deploy")

    typer.secho("\nStarting deployment...\n", fg=typer.colors.BLUE, bold=True)

    try:
        result = deploy(config)
    except VitaeError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("Deploy command:")
    typer.echo(f"   {result.command}\n")

    if not result.success:
        typer.secho(f"✗ Deployment failed: {result.error}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    if result.executed:
        typer.secho(f"✓ Deployed to {config.target}", fg=typer.colors.GREEN, bold=True)
        return

    typer.echo("To deploy, enable RUN_DEPLOY_COMMAND and configure your host settings.\n")
    typer.secho("✓ Deployment configuration ready!", fg=typer.colors.GREEN, bold=True)
    print_instructions()


if __name__ == "__main__":
    app()
