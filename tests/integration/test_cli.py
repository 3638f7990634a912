"""Integration tests for plugdoc CLI commands.

These tests exercise the full CLI workflow against the Referencer manual.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from plugdoc import __version__
from plugdoc.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command in an empty directory so no stray config is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestRender:
    """Integration tests for `plugdoc render`."""

    def test_render_stereo_to_file(self, tmp_path: Path) -> None:
        output_path = tmp_path / "out" / "referencer_stereo.html"

        result = runner.invoke(app, ["render", "--mode", "stereo", "--output", str(output_path)])

        assert result.exit_code == 0, result.output
        content = output_path.read_text(encoding="utf-8")
        assert "Referencer Stereo" in content
        assert "Correlation and spectral correlation" in content

    def test_render_mono_fragment_to_stdout(self) -> None:
        result = runner.invoke(app, ["--quiet", "render", "-m", "m", "--fragment"])

        assert result.exit_code == 0, result.output
        assert "<li>Spectrum analysis.</li>" in result.output
        assert "<!DOCTYPE html>" not in result.output
        assert "Correlation and spectral correlation" not in result.output

    def test_render_unknown_mode(self, tmp_path: Path) -> None:
        output_path = tmp_path / "page.html"

        result = runner.invoke(app, ["render", "--mode", "quad", "--output", str(output_path)])

        assert result.exit_code == 1
        assert not output_path.exists()

    def test_render_dry_run(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "--mode", "mono", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "more lines" in result.output
        assert list(tmp_path.iterdir()) == []


class TestBuild:
    """Integration tests for `plugdoc build`."""

    def test_build_all_variants(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["build", "--output-dir", str(tmp_path / "site")])

        assert result.exit_code == 0, result.output
        mono_page = (tmp_path / "site" / "referencer_mono.html").read_text(encoding="utf-8")
        stereo_page = (tmp_path / "site" / "referencer_stereo.html").read_text(encoding="utf-8")
        assert "Referencer Mono" in mono_page
        assert "Monitoring" not in mono_page
        assert "<b>Monitoring</b> section:" in stereo_page

    def test_build_uses_config(self, tmp_path: Path) -> None:
        config_path = tmp_path / "plugdoc.yaml"
        config_path.write_text(
            "output:\n"
            "  directory: public\n"
            "  filename: '{page}.inc.html'\n"
            "  wrap_page: false\n"
            "modes: [stereo]\n"
        )

        result = runner.invoke(app, ["--config", str(config_path), "build"])

        assert result.exit_code == 0, result.output
        written = list((tmp_path / "public").iterdir())
        assert [p.name for p in written] == ["referencer_stereo.inc.html"]
        assert written[0].read_text(encoding="utf-8").startswith("<p>The referencer plugin")

    def test_build_discovers_config(self, tmp_path: Path) -> None:
        (tmp_path / "plugdoc.yaml").write_text("output:\n  directory: found\nmodes: [mono]\n")

        result = runner.invoke(app, ["build"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "found" / "referencer_mono.html").exists()

    def test_build_page_failure_writes_nothing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from plugdoc.templates import PageRenderer

        def failing_render(self: PageRenderer, document: object, mode: object, **kwargs: object) -> str:
            raise ValueError("Page rendering failed: boom")

        monkeypatch.setattr(PageRenderer, "render", failing_render)

        result = runner.invoke(app, ["build", "--output-dir", str(tmp_path / "site")])

        assert result.exit_code == 1
        assert not (tmp_path / "site").exists()

    def test_invalid_config(self, tmp_path: Path) -> None:
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("modes: [surround]\n")

        result = runner.invoke(app, ["--config", str(config_path), "build"])

        assert result.exit_code == 1


class TestValidate:
    """Integration tests for `plugdoc validate`."""

    def test_validate_referencer(self) -> None:
        result = runner.invoke(app, ["validate"])

        assert result.exit_code == 0, result.output
        assert "Template is valid: referencer" in result.output
        assert "mono" in result.output
        assert "stereo" in result.output

    def test_validate_unknown_manual(self, tmp_path: Path) -> None:
        (tmp_path / "plugdoc.yaml").write_text("manual: compressor\n")

        result = runner.invoke(app, ["validate"])

        assert result.exit_code == 1


class TestVariants:
    """Integration tests for `plugdoc variants`."""

    def test_variants_json(self) -> None:
        result = runner.invoke(app, ["variants", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [entry["acronym"] for entry in data] == ["R1M", "R1S"]

    def test_variants_human(self) -> None:
        result = runner.invoke(app, ["variants"])

        assert result.exit_code == 0, result.output
        assert "mono (m): Referencer Mono [R1M]" in result.output
        assert "GStreamer: referencer_stereo" in result.output


class TestInitAndVersion:
    """Integration tests for `plugdoc init` and --version."""

    def test_init_creates_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / ".plugdoc" / "config.yaml").exists()

    def test_init_refuses_overwrite(self) -> None:
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1

    def test_init_force(self) -> None:
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"plugdoc {__version__}" in result.output
