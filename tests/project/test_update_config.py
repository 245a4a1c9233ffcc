"""Tests for ProjectInitializer.update_config."""

import pytest

from fake_cloner import write_template_tree

from cw3d import config_materializer
from cw3d.errors import UnknownChainError
from cw3d.project.initializer import ProjectInitializer


@pytest.mark.unit
class TestUpdateConfig:

    def test_rewrites_config_in_current_dir(self, tmp_path, registry, fake_prompt, fake_cloner):
        write_template_tree(str(tmp_path), with_git=False)
        initializer = ProjectInitializer(registry, fake_prompt, fake_cloner)

        config_path = initializer.update_config("opt-sepolia", current_dir=str(tmp_path))

        expected = config_materializer.render(
            config_materializer.load_template(), registry.find_chain("opt-sepolia"),
        )
        with open(config_path) as f:
            assert f.read() == expected

    def test_uses_working_directory_by_default(self, tmp_path, monkeypatch, registry, fake_prompt, fake_cloner):
        write_template_tree(str(tmp_path), with_git=False)
        monkeypatch.chdir(tmp_path)

        ProjectInitializer(registry, fake_prompt, fake_cloner).update_config("sepolia")

        content = (tmp_path / "packages" / "shared" / "src" / "cw3d.config.ts").read_text()
        assert "11155111" in content

    def test_performs_no_prompt_or_clone(self, tmp_path, registry, fake_prompt, fake_cloner):
        write_template_tree(str(tmp_path), with_git=False)
        ProjectInitializer(registry, fake_prompt, fake_cloner).update_config(
            "sepolia", current_dir=str(tmp_path),
        )
        assert fake_prompt.calls == []
        assert fake_cloner.calls == []

    def test_unknown_chain_raises_and_leaves_config(self, tmp_path, registry, fake_prompt, fake_cloner):
        write_template_tree(str(tmp_path), with_git=False)
        with pytest.raises(UnknownChainError):
            ProjectInitializer(registry, fake_prompt, fake_cloner).update_config(
                "no-such-chain", current_dir=str(tmp_path),
            )
        content = (tmp_path / "packages" / "shared" / "src" / "cw3d.config.ts").read_text()
        assert content == "// placeholder config\n"

    def test_missing_package_tree_propagates_filesystem_error(self, tmp_path, registry, fake_prompt, fake_cloner):
        with pytest.raises(FileNotFoundError):
            ProjectInitializer(registry, fake_prompt, fake_cloner).update_config(
                "sepolia", current_dir=str(tmp_path),
            )
