"""Commands that derive variable names from values and annotations."""

import ast
import inspect

import click
from rich.markup import escape
from rich.table import Table

from ...domain.entities.type_descriptor import ParameterDescriptor, ReturnDescriptor
from ...domain.exceptions import NamingConventionError
from ...infrastructure.container import DependencyContainer
from ..utils import load_target


@click.command()
@click.argument("expression")
@click.pass_obj
def value_name_command(container: DependencyContainer, expression: str) -> None:
    """Print the variable name for a Python literal such as "[1, 2]"."""
    try:
        value = ast.literal_eval(expression)
    except (ValueError, SyntaxError) as exc:
        raise click.BadParameter(
            f"not a Python literal: {expression!r}", param_hint="EXPRESSION"
        ) from exc
    inferencer = container.create_name_inferencer()
    try:
        name = inferencer.infer_from_value(value)
    except NamingConventionError as exc:
        raise click.ClickException(str(exc)) from exc
    container.console.print(name, markup=False, highlight=False)


@click.command()
@click.argument("target")
@click.pass_obj
def return_name_command(container: DependencyContainer, target: str) -> None:
    """Print the variable name for the return type of TARGET (module:qualname)."""
    func = load_target(target)
    inferencer = container.create_name_inferencer()
    logger = container.create_logger()
    logger.log_target_start(target)
    try:
        name = inferencer.infer_from_return_type(ReturnDescriptor.for_callable(func))
    except NamingConventionError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        logger.log_final_stats()
    container.console.print(name, markup=False, highlight=False)


@click.command()
@click.argument("target")
@click.pass_obj
def parameters_command(container: DependencyContainer, target: str) -> None:
    """List the variable name of every parameter of TARGET (module:qualname)."""
    func = load_target(target)
    inferencer = container.create_name_inferencer()
    logger = container.create_logger()
    logger.log_target_start(target)
    table = Table(title=f"Parameters of {escape(func.__qualname__)}")
    table.add_column("Parameter", style="cyan")
    table.add_column("Annotation")
    table.add_column("Variable name", style="green")
    failures = 0
    for name, parameter in inspect.signature(func).parameters.items():
        annotation = (
            ""
            if parameter.annotation is inspect.Parameter.empty
            else inspect.formatannotation(parameter.annotation)
        )
        try:
            variable_name = inferencer.infer_from_parameter_type(
                ParameterDescriptor(func, name)
            )
        except NamingConventionError as exc:
            failures += 1
            variable_name = f"[red]{escape(str(exc))}[/red]"
        table.add_row(name, escape(annotation), variable_name)
    container.console.print(table)
    if failures:
        logger.warning(f"{failures} parameter(s) could not be named")
    logger.log_final_stats()
