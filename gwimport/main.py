"""
gwimport — CLI entrypoint.

Usage:
    python -m gwimport.main --help
    python -m gwimport.main resolve --output build/serverless.yml
    python -m gwimport.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from gwimport import __version__
from gwimport.core.observability.logging_config import DEFAULT_LEVEL, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="gwimport")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to serverless.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """gwimport — attach a Serverless service to an existing API Gateway."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("GWIMPORT_LOG_LEVEL", DEFAULT_LEVEL)

    setup_logging(
        level=level,
        log_file=os.environ.get("GWIMPORT_LOG_FILE"),
        log_file_level=os.environ.get("GWIMPORT_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--region", default=None, help="AWS region (default: from environment).")
@click.option("--profile", default=None, help="AWS named profile.")
@click.option(
    "--mock-inventory",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read the inventory from a YAML file instead of AWS.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the resolved serverless.yml here.",
)
@click.pass_context
def resolve(
    ctx: click.Context,
    as_json: bool,
    region: str | None,
    profile: str | None,
    mock_inventory: str | None,
    output_path: str | None,
) -> None:
    """Resolve the existing REST API and layer ARNs for the service.

    Examples:

        gwimport resolve

        gwimport resolve --region eu-west-1 --output .build/serverless.yml

        gwimport resolve --mock-inventory inventory.yml --json
    """
    from gwimport.adapters.base import ProviderClient
    from gwimport.core.use_cases.resolve import run_resolve

    def make_client() -> ProviderClient:
        if mock_inventory:
            from gwimport.adapters.mock import MockProviderClient

            return MockProviderClient.from_file(Path(mock_inventory))

        from gwimport.adapters.aws import Boto3ProviderClient

        return Boto3ProviderClient(region=region, profile=profile)

    result = run_resolve(
        make_client,
        config_path=ctx.obj.get("config_path"),
        output_path=Path(output_path) if output_path else None,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if result.skipped:
        click.secho("⊘ No custom.importApiGateway.name configured, nothing to import", fg="yellow")
        return

    report = result.report
    assert report is not None
    assert result.config is not None

    if report.aborted:
        click.secho(f"❌ Import of '{result.config.name}' aborted", fg="red", bold=True)
        click.echo(f"   {report.error}")
        sys.exit(1)

    resolved = report.resolved
    assert resolved is not None

    click.secho(f"\n🔗 {result.config.name}", fg="cyan", bold=True)
    click.echo(f"   REST API:      {resolved.rest_api_id}")
    click.echo(f"   Root resource: {resolved.rest_api_root_resource_id} ({result.config.path})")
    click.echo(f"   Resources:     {len(resolved.rest_api_resources)}")
    for path, resource_id in resolved.rest_api_resources.items():
        click.echo(f"     • {path:<40} {resource_id}")

    if report.layers:
        click.echo()
        click.secho(f"   Layers: {len(report.layers.resolutions)}", fg="white", bold=True)
        for resolution in report.layers.resolutions:
            if resolution.resolved:
                click.secho("     ✓ ", fg="green", nl=False)
                click.echo(f"{resolution.owner}: {resolution.arn}")
            else:
                click.secho("     ✗ ", fg="red", nl=False)
                click.echo(f"{resolution.owner}: {resolution.reference} (not found, dropped)")

    if result.output_path:
        click.echo()
        click.secho(f"   💾 Written to {result.output_path}", fg="cyan")

    click.echo()


@cli.group()
def config() -> None:
    """Service configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate serverless.yml and its import configuration."""
    from gwimport.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config:
            click.echo(f"   REST API:  {result.config.name}")
            click.echo(f"   Root path: {result.config.path}")
            resources = result.config.resources
            if resources is None:
                click.echo("   Resources: (inferred from http events)")
            else:
                click.echo(f"   Resources: {', '.join(resources) or '(none)'}")
            click.echo(f"   Resolve layer ARNs: {'yes' if result.config.resolve_layer_arns else 'no'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()
