"""Click-based CLI for inspecting and exercising a VBGP configuration."""

import json
import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from vbgp.configuration.errors import VBGPConfigurationError
from vbgp.configuration.registry import VBGPConfiguration
from vbgp.input.reader import read_configuration
from vbgp.input.schemas import parse_snapshot
from vbgp.model.goals import AgentArchetype
from vbgp.processes.errors import GoalPrioritizingError
from vbgp.processes.nearest import find_nearest_value
from vbgp.processes.prioritizing import ValueBasedGoalPrioritizing

logger = logging.getLogger(__name__)


def load_configuration(config_file: Path) -> VBGPConfiguration:
    """Read the CSV configuration, turning validation failures into CLI errors."""
    try:
        return read_configuration(config_file)
    except VBGPConfigurationError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def cli(verbose: bool) -> None:
    """Value-based goal prioritizing tools.

    Validate gain/loss-to-value tables, query them, and run a single
    prioritizing cycle over a goal-state snapshot.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("CLI initialized")


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a gain/loss-to-value CSV file and list its goals.

    Example:

        vbgp validate vbgp.csv
    """
    config = load_configuration(config_file)
    click.echo(f"{config_file}: {config.goal_count} goals")
    for name, mapping in config.gain_and_loss_to_value.items():
        click.echo(
            f"  {name}: {len(mapping.loss_to_value)} loss points, "
            f"{len(mapping.gain_to_value)} gain points"
        )


# Negative ARGUMENT values would otherwise be parsed as options
@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("goal")
@click.argument("argument", type=float)
@click.option(
    "--side",
    type=click.Choice(["loss", "gain"], case_sensitive=False),
    default=None,
    help="Curve to search (default: loss for negative arguments, gain otherwise)",
)
def lookup(config_file: Path, goal: str, argument: float, side: Optional[str]) -> None:
    """Print the value mapped to the argument nearest to ARGUMENT.

    ARGUMENT is a normalized relative change in [-1, 1].

    Example:

        vbgp lookup vbgp.csv Profit -0.2
    """
    config = load_configuration(config_file)
    mapping = config.get(goal)
    if mapping is None:
        raise click.BadParameter(f"Unknown goal '{goal}'", param_hint="GOAL")

    if side is None:
        side = "loss" if argument < 0 else "gain"
    curve = mapping.loss_to_value if side.lower() == "loss" else mapping.gain_to_value
    click.echo(f"{find_nearest_value(curve, argument):g}")


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("goals_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--no-adjusting",
    is_flag=True,
    help="Run as an agent that does not use importance adjusting",
)
def prioritize(config_file: Path, goals_file: Path, no_adjusting: bool) -> None:
    """Run one prioritizing cycle over a JSON goal-state snapshot.

    Prints the adjusted importance of every goal as JSON.

    Example:

        vbgp prioritize vbgp.csv goals.json
    """
    config = load_configuration(config_file)

    try:
        snapshot = parse_snapshot(goals_file.read_bytes())
    except ValidationError as e:
        raise click.ClickException(f"{goals_file}: invalid goal states: {e}")

    agent = AgentArchetype(uses_importance_adjusting=not no_adjusting)
    process = ValueBasedGoalPrioritizing(config)
    try:
        adjusted = process.prioritize(agent, snapshot.to_goal_states())
    except GoalPrioritizingError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps({goal.name: importance for goal, importance in adjusted.items()}, indent=2))


if __name__ == "__main__":
    cli()
