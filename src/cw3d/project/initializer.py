"""ProjectInitializer: creates a project from the template repository.

Cancellation and clone failure are returned as results rather than exiting
the process, so only the CLI decides the exit status.
"""

import os
import shutil
from dataclasses import dataclass

import click

from cw3d import config_materializer
from cw3d.errors import CloneError, InvalidProjectNameError

TEMPLATE_REPO_URL = "https://github.com/alchemyplatform/scaffold-alchemy"


@dataclass(frozen=True)
class ProjectContext:
    """Where a freshly initialized project lives."""
    project_name: str
    project_dir: str
    current_dir: str


@dataclass(frozen=True)
class Ok:
    context: ProjectContext


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class Failed:
    reason: str


class ProjectInitializer:
    """Orchestrates project creation using injected collaborators.

    Args:
        registry: ChainRegistry used to resolve chain short names.
        prompt: Object with confirm(message, default) -> bool.
        cloner: Object with clone(url, destination); raises CloneError.
        template_url: Repository cloned into each new project.
    """

    def __init__(self, registry, prompt, cloner, template_url=TEMPLATE_REPO_URL):
        self._registry = registry
        self._prompt = prompt
        self._cloner = cloner
        self._template_url = template_url

    def initialize(self, project_name, chain_short_name, current_dir=None):
        """Create project_name under current_dir configured for a chain.

        Returns:
            Ok(ProjectContext) on success, Cancelled() if the user declined
            to overwrite an existing directory, Failed(reason) if the clone
            or configuration step failed.

        Raises:
            UnknownChainError: Before any filesystem change, if the chain
                short name is not in the registry.
            InvalidProjectNameError: If project_name does not name a
                directory strictly below current_dir.
            OSError: If deleting or creating the project directory fails.
        """
        current_dir = os.path.abspath(current_dir or os.getcwd())
        project_dir = _project_dir_for(current_dir, project_name)
        chain = self._registry.require_chain(chain_short_name)

        if os.path.exists(project_dir):
            if not self._prompt.confirm(
                f"Directory {project_name} already exists. Do you want to overwrite it?",
                default=False,
            ):
                return Cancelled()
            shutil.rmtree(project_dir)

        os.makedirs(project_dir, exist_ok=True)

        click.echo(click.style("\nCloning scaffold-alchemy template...", fg="cyan"))
        try:
            self._cloner.clone(self._template_url, project_dir)
            _remove_git_metadata(project_dir)
            config_materializer.materialize(project_dir, chain)
        except (CloneError, OSError) as exc:
            return Failed(str(exc))

        return Ok(ProjectContext(project_name, project_dir, current_dir))

    def update_config(self, chain_short_name, current_dir=None):
        """Rewrite the config of the project in current_dir for a chain.

        Performs no directory or clone operations.

        Returns:
            The path of the rewritten config file.

        Raises:
            UnknownChainError: If the chain short name is not in the registry.
            OSError: If the config file cannot be written.
        """
        chain = self._registry.require_chain(chain_short_name)
        return config_materializer.materialize(current_dir or os.getcwd(), chain)


def _project_dir_for(current_dir, project_name):
    """Return the project directory, which must lie strictly below current_dir."""
    project_dir = os.path.normpath(os.path.join(current_dir, project_name))
    if project_dir == current_dir or os.path.commonpath([current_dir, project_dir]) != current_dir:
        raise InvalidProjectNameError(project_name)
    return project_dir


def _remove_git_metadata(project_dir):
    """Delete the clone's .git, whether a directory or a gitfile.

    A missing .git is fine; any other failure propagates.
    """
    git_dir = os.path.join(project_dir, ".git")
    if os.path.isdir(git_dir) and not os.path.islink(git_dir):
        shutil.rmtree(git_dir)
    elif os.path.lexists(git_dir):
        os.remove(git_dir)
