"""Click commands for creating and reconfiguring projects."""

import sys

import click

from cw3d.chains.registry import ChainRegistry
from cw3d.errors import Cw3dError
from cw3d.project.detection import is_inside_project
from cw3d.project.initializer import (
    TEMPLATE_REPO_URL,
    Cancelled,
    Failed,
    ProjectInitializer,
)
from cw3d.project.template_cloner import TemplateCloner
from cw3d.prompt import ClickPrompt


def _chain_option():
    return click.option(
        "--chain", "chain", required=True,
        help="Chain short name (see `cw3d chains`).",
    )


def _fail(message):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.command("new")
@click.argument("project_name")
@_chain_option()
@click.option(
    "--template-url", default=TEMPLATE_REPO_URL, show_default=True,
    envvar="CW3D_TEMPLATE_URL",
    help="Git repository to clone as the project template.",
)
def new_cmd(project_name, chain, template_url):
    """Create PROJECT_NAME from the template, configured for a chain."""
    initializer = ProjectInitializer(
        ChainRegistry.default(), ClickPrompt(), TemplateCloner(), template_url,
    )
    try:
        result = initializer.initialize(project_name, chain)
    except (Cw3dError, OSError) as exc:
        _fail(exc)

    if isinstance(result, Cancelled):
        click.echo(click.style("Operation cancelled", fg="red"))
        sys.exit(1)
    if isinstance(result, Failed):
        click.echo(click.style("\nFailed to clone template: ", fg="red") + result.reason, err=True)
        sys.exit(1)

    context = result.context
    click.echo(click.style(f"\nCreated {context.project_name} in {context.project_dir}", fg="green"))
    click.echo("")
    click.echo("Next steps:")
    click.echo(f"  cd {context.project_name}")
    click.echo("  yarn install")


@click.command("config")
@_chain_option()
def config_cmd(chain):
    """Reconfigure the project in the current directory for a chain."""
    if not is_inside_project():
        _fail("not inside a scaffold-alchemy project (run this from the project root)")

    initializer = ProjectInitializer(ChainRegistry.default(), ClickPrompt(), TemplateCloner())
    try:
        config_path = initializer.update_config(chain)
    except (Cw3dError, OSError) as exc:
        _fail(exc)
    click.echo(click.style(f"Updated {config_path} for {chain}", fg="green"))


@click.command("check")
def check_cmd():
    """Exit 0 if the current directory is a project root, 1 otherwise."""
    if is_inside_project():
        click.echo("Inside a scaffold-alchemy project.")
        return
    click.echo("Not inside a scaffold-alchemy project.")
    sys.exit(1)
