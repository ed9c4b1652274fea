"""CLI entry point for crand."""

from __future__ import annotations

from pathlib import Path
from typing import get_args

import click

from crand.config.defaults import default_sampling_config
from crand.config.schema import EngineConfig, EngineKind, SamplingConfig
from crand.core.factory import make_distribution, make_engine
from crand.io.serialize import dump_engine_state, dump_samples_summary
from crand.io.yaml_loader import load_config_file
from crand.utils.exceptions import ConfigError

ENGINE_CHOICES = list(get_args(EngineKind))


@click.group()
@click.version_option(package_name="crand")
def cli() -> None:
    """crand — deterministic random engines and distributions."""


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a JSON or YAML sampling config. Uses defaults if not provided.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write a JSON summary of the drawn values.",
)
@click.option("--engine", type=click.Choice(ENGINE_CHOICES), default=None, help="Engine kind.")
@click.option("--seed", default=None, type=int, help="Engine seed.")
@click.option("--count", default=None, type=int, help="Number of values to draw.")
def sample(
    config_path: Path | None,
    output_path: Path | None,
    engine: str | None,
    seed: int | None,
    count: int | None,
) -> None:
    """Draw values from the configured distribution."""
    try:
        config = load_config_file(config_path) if config_path is not None else default_sampling_config()
        # CLI overrides
        if engine is not None or seed is not None:
            engine_config = config.engine.model_dump()
            if engine is not None and engine != config.engine.kind:
                engine_config.update(kind=engine, gamma=None)
            if seed is not None:
                engine_config["seed"] = seed
            config = config.model_copy(update={"engine": EngineConfig.model_validate(engine_config)})
        if count is not None:
            config = SamplingConfig.model_validate({**config.model_dump(), "count": count})
    except (ConfigError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    rng = make_engine(config.engine)
    dist = make_distribution(config.distribution)
    click.echo(f"Sampling {config.count} x {config.distribution.kind} with {config.engine.kind}")

    values = dist.sample(rng, config.count)
    for value in values:
        click.echo(repr(value.item()) if hasattr(value, "item") else repr(value))

    if output_path is not None:
        output_path.write_text(dump_samples_summary(values, rng))
        click.echo(f"\nSummary written to {output_path}")


@cli.command()
@click.option("--engine", type=click.Choice(ENGINE_CHOICES), default="xoshiro256**", help="Engine kind.")
@click.option("--seed", default=None, type=int, help="Engine seed.")
@click.option(
    "--discard",
    default=0,
    type=click.IntRange(min=0),
    help="Advance the engine this many steps first.",
)
def state(engine: str, seed: int | None, discard: int) -> None:
    """Print an engine's raw state vector as JSON."""
    try:
        rng = make_engine(EngineConfig.model_validate({"kind": engine, "seed": seed}))
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    rng.discard(discard)
    click.echo(dump_engine_state(rng))


if __name__ == "__main__":
    cli()
