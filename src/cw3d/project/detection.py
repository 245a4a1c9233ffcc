"""Detect whether a directory is the root of a scaffolded project."""

import json
import os

from cw3d.config_materializer import config_path_for


def is_inside_project(current_dir=None) -> bool:
    """Return True if current_dir looks like a scaffolded project root.

    Requires a package.json declaring a non-empty workspaces.packages list,
    a packages/shared directory, and the cw3d.config.ts file under it.
    Never raises: any missing or malformed piece yields False.
    """
    current_dir = current_dir or os.getcwd()
    if not _declares_workspace_packages(os.path.join(current_dir, "package.json")):
        return False
    if not os.path.isdir(os.path.join(current_dir, "packages", "shared")):
        return False
    return os.path.isfile(config_path_for(current_dir))


def _declares_workspace_packages(package_json):
    try:
        with open(package_json, encoding="utf-8") as f:
            manifest = json.load(f)
    except (OSError, ValueError):
        return False
    if not isinstance(manifest, dict):
        return False
    workspaces = manifest.get("workspaces")
    if not isinstance(workspaces, dict):
        return False
    packages = workspaces.get("packages")
    return isinstance(packages, list) and len(packages) > 0
