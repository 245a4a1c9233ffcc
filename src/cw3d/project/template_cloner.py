"""TemplateCloner: shallow-clones the upstream template repository."""

from git import Repo
from git.exc import GitError

from cw3d.errors import CloneError


class TemplateCloner:
    """Clones a repository with history depth 1 using GitPython."""

    def clone(self, url, destination):
        """Shallow-clone url into destination.

        Raises:
            CloneError: If git reports any failure (network, auth, bad URL).
        """
        try:
            Repo.clone_from(url, destination, depth=1)
        except GitError as exc:
            raise CloneError(str(exc)) from exc
