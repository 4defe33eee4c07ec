# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .compare import compare, version_key
from .config import ParserConfig, load_config
from .errors import ConfigError, VersionParseError
from .parser import is_valid_semver, parse_version
from .version import Version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ParserConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> ParserConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def parse(self, text: str) -> Version:
        """Parse a version with the project configuration, exiting on failure."""
        try:
            return parse_version(text, self.load_config())
        except (ConfigError, VersionParseError) as e:
            echo_error(str(e))
            sys.exit(1)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def _version_fields(version: Version) -> dict:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "pre_release": version.pre_release,
        "pre_release_identifiers": list(version.pre_release_identifiers),
        "build_metadata": version.build_metadata,
        "short_form": version.short_form,
        "full_form": version.full_form,
        "is_alpha": version.is_alpha,
        "is_beta": version.is_beta,
        "is_dev": version.is_dev,
        "is_release_candidate": version.is_release_candidate,
        "is_snapshot": version.is_snapshot,
    }


@click.group()
@click.version_option(package_name="strict-semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.strict-semver] options from this project directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing and comparison.

    \b
    Examples:
        semver parse v1.2.3-rc.1+build.5
        semver compare 1.0.0 1.0.0-alpha
        semver sort 1.0.0 1.0.0-beta 0.9.0
        semver validate 1.0.0 01.0.0
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command("parse")
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print every field as JSON.")
@pass_context
def parse_command(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its canonical form."""
    parsed = ctx.parse(version)
    if as_json:
        click.echo(json.dumps(_version_fields(parsed), indent=2))
    else:
        click.echo(str(parsed))


@cli.command("compare")
@click.argument("current")
@click.argument("other")
@pass_context
def compare_command(ctx: Context, current: str, other: str) -> None:
    """Print whether CURRENT is newer, equal or older than OTHER."""
    result = compare(ctx.parse(current), ctx.parse(other))
    click.echo(result.value)


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Newest version first.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in order of precedence, oldest first."""
    parsed = [ctx.parse(v) for v in versions]
    for version in sorted(parsed, key=version_key, reverse=reverse):
        click.echo(str(version))


@cli.command("validate")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate_command(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every one of VERSIONS is a valid semantic version."""
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    invalid = 0
    for version in versions:
        if is_valid_semver(version, config):
            echo_success(f"{version}: valid")
        else:
            click.secho(f"{version}: invalid", fg="red")
            invalid += 1

    if invalid:
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
