"""Config materializer: renders cw3d.config.ts from the bundled template."""

import os
import re
from pathlib import Path

from cw3d.chains.registry import ChainConfig


_TEMPLATES_DIR = Path(__file__).parent / "templates"
CONFIG_TEMPLATE_NAME = "cw3d.config.template"

PLACEHOLDER_FIELDS = {
    "{{mainnetName}}": "mainnet_name",
    "{{mainnetChainId}}": "mainnet_chain_id",
    "{{testnetChainId}}": "testnet_chain_id",
    "{{testnetChainName}}": "testnet_chain_name",
}
_PLACEHOLDER_PATTERN = re.compile("|".join(re.escape(token) for token in PLACEHOLDER_FIELDS))


def config_path_for(base_dir) -> str:
    """Return the path of cw3d.config.ts inside a project rooted at base_dir."""
    return os.path.join(base_dir, "packages", "shared", "src", "cw3d.config.ts")


def load_template(template_name: str = CONFIG_TEMPLATE_NAME) -> str:
    """Read a bundled template.

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    template_path = _TEMPLATES_DIR / template_name
    if not template_path.is_file():
        raise FileNotFoundError(f"Template not found: {template_path}")
    return template_path.read_text(encoding="utf-8")


def render(template: str, chain: ChainConfig) -> str:
    """Replace every occurrence of each placeholder with the chain's value.

    Substitution is a single pass, so values are inserted verbatim even if
    they contain placeholder text. There is no escaping and no template
    language beyond the four fixed tokens.
    """
    return _PLACEHOLDER_PATTERN.sub(
        lambda match: getattr(chain, PLACEHOLDER_FIELDS[match.group(0)]), template,
    )


def write(project_dir, content: str) -> None:
    """Write content to the project's config file, replacing any existing file.

    The packages/shared/src directory must already exist.
    """
    with open(config_path_for(project_dir), "w", encoding="utf-8") as f:
        f.write(content)


def materialize(project_dir, chain: ChainConfig) -> str:
    """Render the bundled template for chain into project_dir.

    Returns:
        The path of the written config file.
    """
    write(project_dir, render(load_template(), chain))
    return config_path_for(project_dir)
