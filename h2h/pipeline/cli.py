#!/usr/bin/env python3
"""
h2h CLI
------------------------

Command-line interface for converting post front matter between Hexo and
Hugo.

Commands:
    - convert: Convert a tree of posts into a mirrored destination tree
    - mappings: Show the key renames applied for a direction

Usage:
    # Hexo YAML posts to Hugo TOML posts
    h2h convert source/_posts content/posts --to toml

    # Back from Hugo to Hexo, four workers
    h2h convert content/posts source/_posts -d hugo2hexo --from toml -j 4

    # Settings from a file, one extra rename
    h2h convert in/ out/ --config h2h.yaml --map excerpt=summary

    # What would be converted
    h2h convert in/ out/ --dry-run
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

import click

from h2h.core.cli import setup_logger
from h2h.core.config import LOG_DIR, Config, default_config, load_config
from h2h.core.exceptions import ConversionFailedError, H2HError
from h2h.core.logging_manager import H2HLogger, handle_cli_error
from h2h.pipeline.codecs import Format
from h2h.pipeline.engine import convert_posts
from h2h.pipeline.keymaps import Direction


def _parse_mappings(
    ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]
) -> Dict[str, str]:
    """Turn repeated ``OLD=NEW`` options into a dict."""
    pairs: Dict[str, str] = {}
    for value in values:
        source, sep, target = value.partition("=")
        source, target = source.strip(), target.strip()
        if not sep or not source or not target:
            raise click.BadParameter(f"expected OLD=NEW, got {value!r}", ctx, param)
        pairs[source] = target
    return pairs


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """h2h - Hexo/Hugo front matter converter"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "h2h")


@cli.command()
@click.argument("src", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("dst", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with conversion settings (options below override it)",
)
@click.option(
    "--from",
    "source_format",
    type=click.Choice(Format.choices(), case_sensitive=False),
    help="Format of the source front matter [default: yaml]",
)
@click.option(
    "--to",
    "target_format",
    type=click.Choice(Format.choices(), case_sensitive=False),
    help="Format of the converted front matter [default: yaml]",
)
@click.option(
    "-d",
    "--direction",
    type=click.Choice(Direction.choices(), case_sensitive=False),
    help="Conversion direction [default: hexo2hugo]",
)
@click.option("-e", "--ext", "file_extension", help="File suffix to convert [default: .md]")
@click.option(
    "-j",
    "--max-concurrency",
    type=click.IntRange(min=1),
    help="Files converted at the same time [default: CPU count]",
)
@click.option(
    "-m",
    "--map",
    "mappings",
    multiple=True,
    metavar="OLD=NEW",
    callback=_parse_mappings,
    help="Extra key rename; repeatable",
)
@click.option("--dry-run", is_flag=True, help="List matching files without converting")
@click.pass_context
def convert(
    ctx: click.Context,
    src: Path,
    dst: Path,
    config_file: Optional[Path],
    source_format: Optional[str],
    target_format: Optional[str],
    direction: Optional[str],
    file_extension: Optional[str],
    max_concurrency: Optional[int],
    mappings: Dict[str, str],
    dry_run: bool,
) -> None:
    """
    Convert the front matter of every post under SRC into DST.

    The directory structure of SRC is mirrored under DST. Bodies are copied
    unchanged. Files that fail are reported and skipped; the command exits
    with status 1 if any did.
    """
    logger: H2HLogger = ctx.obj["logger"]
    context = {"source": str(src), "destination": str(dst)}

    try:
        base = load_config(config_file) if config_file else default_config()
        config = base.with_changes(
            source_format=source_format,
            target_format=target_format,
            direction=direction,
            file_extension=file_extension,
            max_concurrency=max_concurrency,
            key_overrides={**base.key_overrides, **mappings} if mappings else None,
        )
    except H2HError as e:
        handle_cli_error(ctx, e, "convert", additional_context=context)
        return

    if dry_run:
        click.echo("🔍 Listing posts (DRY RUN - no files will be written)...")
    else:
        click.echo(
            f"🔄 Converting {config.direction.value} "
            f"({config.source_format.value} → {config.target_format.value})..."
        )

    try:
        stats = convert_posts(src, dst, config, logger, dry_run=dry_run)
    except ConversionFailedError as e:
        if e.stats is not None:
            click.echo(f"Processed {e.stats.files_converted} files")
        for failure in e.failures:
            click.echo(f"Error: {failure}", err=True)
        handle_cli_error(ctx, e, "convert", additional_context=context)
        return
    except (H2HError, OSError) as e:
        handle_cli_error(ctx, e, "convert", additional_context=context)
        return

    if dry_run:
        click.echo(f"Would convert {stats.files_found} files:")
        for path in stats.matched_files:
            click.echo(f"  • {path.relative_to(src)}")
        click.echo(f"\nOutput directory: {dst}")
        click.echo("\n💡 Run without --dry-run to execute conversion")
        return

    click.echo(f"Processed {stats.files_converted} files")
    click.echo(f"✅ Conversion complete in {stats.duration():.2f}s")


@cli.command()
@click.option(
    "-d",
    "--direction",
    type=click.Choice(Direction.choices(), case_sensitive=False),
    default=Direction.HEXO_TO_HUGO.value,
    show_default=True,
    help="Conversion direction",
)
@click.option(
    "-m",
    "--map",
    "extra",
    multiple=True,
    metavar="OLD=NEW",
    callback=_parse_mappings,
    help="Extra key rename; repeatable",
)
@click.pass_context
def mappings(ctx: click.Context, direction: str, extra: Dict[str, str]) -> None:
    """Show the front matter keys renamed in a direction."""
    try:
        config = Config(direction=direction, key_overrides=extra)
    except H2HError as e:
        handle_cli_error(ctx, e, "mappings", additional_context={"direction": direction})
        return

    click.echo(f"Key renames for {config.direction.value}:")
    for source, target in sorted(config.key_map.items()):
        click.echo(f"  {source} → {target}")
    click.echo("All other keys are copied unchanged.")


if __name__ == "__main__":
    cli(obj={})
