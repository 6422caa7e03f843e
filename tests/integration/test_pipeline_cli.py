#!/usr/bin/env python3
"""
Integration tests for the h2h CLI.

Invokes the click commands on temporary trees and checks exit codes,
terminal output and written files.
"""
import pytest
from click.testing import CliRunner

from h2h.pipeline.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_dir):
    """Invoke the CLI with logs kept in the temporary directory."""
    def _invoke(*args):
        return runner.invoke(cli, ["--log-dir", str(tmp_dir / "logs"), *map(str, args)])
    return _invoke


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Hexo/Hugo front matter converter" in result.output

    def test_convert_help(self, runner):
        result = runner.invoke(cli, ["convert", "--help"])
        assert result.exit_code == 0
        assert "--max-concurrency" in result.output
        assert "--dry-run" in result.output

    def test_logs_written(self, invoke, src_dir, dst_dir, tmp_dir):
        invoke("convert", src_dir, dst_dir, "-j", "1")
        assert (tmp_dir / "logs" / "operations" / "h2h.log").exists()


class TestConvertCommand:
    """Test the convert command."""

    def test_success(self, invoke, src_dir, dst_dir, write_post, hexo_post):
        write_post(src_dir, "a.md", hexo_post)
        write_post(src_dir, "nested/b.md", hexo_post)
        result = invoke("convert", src_dir, dst_dir, "-j", "2")
        assert result.exit_code == 0, result.output
        assert "Processed 2 files" in result.output
        assert "✅ Conversion complete" in result.output
        assert (dst_dir / "nested" / "b.md").read_text(encoding="utf-8").startswith(
            "---\nslug: /x\n"
        )

    def test_to_toml(self, invoke, src_dir, dst_dir, write_post, hexo_post):
        write_post(src_dir, "a.md", hexo_post)
        result = invoke("convert", src_dir, dst_dir, "--to", "toml")
        assert result.exit_code == 0, result.output
        assert "(yaml → toml)" in result.output
        assert 'slug = "/x"' in (dst_dir / "a.md").read_text(encoding="utf-8")

    def test_hugo_to_hexo(self, invoke, src_dir, dst_dir, write_post):
        write_post(src_dir, "a.md", '---\nslug = "x"\n---\nBody\n')
        result = invoke("convert", src_dir, dst_dir, "-d", "hugo2hexo", "--from", "toml")
        assert result.exit_code == 0, result.output
        assert (dst_dir / "a.md").read_text(encoding="utf-8") == "---\npermalink: x\n---\n\nBody\n"

    def test_extra_mapping(self, invoke, src_dir, dst_dir, write_post):
        write_post(src_dir, "a.md", "---\nexcerpt: E\n---\nBody\n")
        result = invoke("convert", src_dir, dst_dir, "-m", "excerpt=summary")
        assert result.exit_code == 0, result.output
        assert "summary: E" in (dst_dir / "a.md").read_text(encoding="utf-8")

    def test_bad_mapping(self, invoke, src_dir, dst_dir):
        result = invoke("convert", src_dir, dst_dir, "-m", "excerpt")
        assert result.exit_code == 2
        assert "expected OLD=NEW" in result.output

    def test_config_file(self, invoke, src_dir, dst_dir, tmp_dir, write_post, hexo_post):
        write_post(src_dir, "a.md", hexo_post)
        config = tmp_dir / "h2h.yaml"
        config.write_text("target_format: toml\nmax_concurrency: 1\n", encoding="utf-8")
        result = invoke("convert", src_dir, dst_dir, "-c", config)
        assert result.exit_code == 0, result.output
        assert 'title = "Hello"' in (dst_dir / "a.md").read_text(encoding="utf-8")

    def test_options_override_config_file(
        self, invoke, src_dir, dst_dir, tmp_dir, write_post, hexo_post
    ):
        write_post(src_dir, "a.md", hexo_post)
        config = tmp_dir / "h2h.yaml"
        config.write_text("target_format: toml\n", encoding="utf-8")
        result = invoke("convert", src_dir, dst_dir, "-c", config, "--to", "yaml")
        assert result.exit_code == 0, result.output
        assert "title: Hello" in (dst_dir / "a.md").read_text(encoding="utf-8")

    def test_invalid_config_file(self, invoke, src_dir, dst_dir, tmp_dir):
        config = tmp_dir / "h2h.yaml"
        config.write_text("max_concurrency: 0\n", encoding="utf-8")
        result = invoke("convert", src_dir, dst_dir, "-c", config)
        assert result.exit_code == 1
        assert "ConfigurationError" in result.output

    def test_zero_concurrency_rejected(self, invoke, src_dir, dst_dir):
        result = invoke("convert", src_dir, dst_dir, "-j", "0")
        assert result.exit_code == 2

    def test_unknown_format_rejected(self, invoke, src_dir, dst_dir):
        result = invoke("convert", src_dir, dst_dir, "--to", "json")
        assert result.exit_code == 2

    def test_missing_source(self, invoke, tmp_dir, dst_dir):
        result = invoke("convert", tmp_dir / "missing", dst_dir)
        assert result.exit_code == 2

    def test_partial_failure(self, invoke, src_dir, dst_dir, write_post, hexo_post):
        write_post(src_dir, "good.md", hexo_post)
        write_post(src_dir, "bad.md", "no front matter\n")
        result = invoke("convert", src_dir, dst_dir, "-j", "2")
        assert result.exit_code == 1
        assert "Processed 1 files" in result.output
        assert f"Error: converting file {src_dir / 'bad.md'}" in result.output
        assert "encountered 1 errors during conversion" in result.output
        assert (dst_dir / "good.md").exists()
        assert not (dst_dir / "bad.md").exists()

    def test_dry_run(self, invoke, src_dir, dst_dir, write_post, hexo_post):
        write_post(src_dir, "a.md", hexo_post)
        write_post(src_dir, "nested/b.md", hexo_post)
        result = invoke("convert", src_dir, dst_dir, "--dry-run")
        assert result.exit_code == 0, result.output
        assert "DRY RUN" in result.output
        assert "Would convert 2 files:" in result.output
        assert "nested/b.md" in result.output
        assert not dst_dir.exists()


class TestMappingsCommand:
    """Test the mappings command."""

    def test_default_direction(self, invoke):
        result = invoke("mappings")
        assert result.exit_code == 0
        assert "Key renames for hexo2hugo:" in result.output
        assert "  permalink → slug" in result.output
        assert "  sticky → weight" in result.output
        assert "  updated → lastmod" in result.output
        assert "All other keys are copied unchanged." in result.output

    def test_reverse_direction(self, invoke):
        result = invoke("mappings", "-d", "hugo2hexo")
        assert result.exit_code == 0
        assert "  slug → permalink" in result.output

    def test_extra_mapping_listed(self, invoke):
        result = invoke("mappings", "-m", "excerpt=summary")
        assert result.exit_code == 0
        assert "  excerpt → summary" in result.output
