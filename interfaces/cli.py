"""
Command-line interface for the distribution functions.

This CLI provides access to:
- Probability density (pdf)
- Cumulative distribution (cdf)
- Percent point / quantile (ppf)
- Consistency diagnostics
"""

import logging

import click

from distrs import Normal, StudentsT, __version__
from distrs.core import mathlib
from distrs.diagnostics.consistency import run_all_checks, summarize


def _distribution_options(command):
    """Attach the shared distribution/parameter options to a command."""
    command = click.option("--df", type=float, default=None, help="Degrees of freedom (t only)")(command)
    command = click.option("--std-dev", "-s", type=float, default=1.0, help="Standard deviation (normal only)")(command)
    command = click.option("--mean", "-m", type=float, default=0.0, help="Mean (normal only)")(command)
    command = click.option(
        "--dist", "-d", type=click.Choice(["normal", "t"]), default="normal", help="Distribution"
    )(command)
    return command


def _require_df(dist, df):
    if dist == "t" and df is None:
        raise click.BadParameter("--df is required for the t distribution", param_hint="--df")


def _format(value: float) -> str:
    return f"{value:.15g}"


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Normal and Student's t distribution functions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger(__name__).debug("Math backend: %s", mathlib.BACKEND)


@cli.command()
@_distribution_options
@click.argument("x", type=float)
def pdf(dist, mean, std_dev, df, x):
    """Evaluate the probability density at X."""
    _require_df(dist, df)
    value = Normal.pdf(x, mean, std_dev) if dist == "normal" else StudentsT.pdf(x, df)
    click.echo(_format(value))


@cli.command()
@_distribution_options
@click.argument("x", type=float)
def cdf(dist, mean, std_dev, df, x):
    """Evaluate the cumulative distribution at X."""
    _require_df(dist, df)
    value = Normal.cdf(x, mean, std_dev) if dist == "normal" else StudentsT.cdf(x, df)
    click.echo(_format(value))


@cli.command()
@_distribution_options
@click.argument("p", type=float)
def ppf(dist, mean, std_dev, df, p):
    """Evaluate the quantile (inverse CDF) at probability P."""
    _require_df(dist, df)
    value = Normal.ppf(p, mean, std_dev) if dist == "normal" else StudentsT.ppf(p, df)
    click.echo(_format(value))


@cli.command()
@_distribution_options
def check(dist, mean, std_dev, df):
    """Run consistency diagnostics for one parameterization."""
    _require_df(dist, df)
    checks = run_all_checks(dist, mean=mean, std_dev=std_dev, df=df)

    click.echo(f"\nDiagnostics for {dist} distribution:")
    for name, result in checks.items():
        status = "ok" if result.is_valid else "FAILED"
        click.echo(f"  {name:<14}{status}")

    is_valid, violations = summarize(checks)
    if not is_valid:
        for message in violations:
            click.echo(f"  {message}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
