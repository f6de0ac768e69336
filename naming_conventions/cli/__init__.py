from pathlib import Path

import click
from rich.console import Console

from ..config import ConfigLoader
from ..infrastructure.container import DependencyContainer
from .commands.attributes import property_name_command, qualify_command
from .commands.names import parameters_command, return_name_command, value_name_command


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a naming_conventions.toml config file (default: ./naming_conventions.toml)",
)
@click.option("-v", "--verbose", count=True, help="Increase output verbosity")
@click.pass_context
def app(ctx: click.Context, config_file: Path | None, verbose: int) -> None:
    ctx.obj = DependencyContainer(
        verbose=verbose,
        console=Console(),
        config=ConfigLoader.load(config_file),
    )


app.add_command(value_name_command, name="value-name")
app.add_command(return_name_command, name="return-name")
app.add_command(parameters_command, name="parameters")
app.add_command(property_name_command, name="property-name")
app.add_command(qualify_command, name="qualify")
__all__ = ["app"]
