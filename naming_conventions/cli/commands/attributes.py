import click

from ...infrastructure.container import DependencyContainer


@click.command()
@click.argument("attribute_name")
@click.pass_obj
def property_name_command(container: DependencyContainer, attribute_name: str) -> None:
    """Convert a hyphenated attribute name into a camel-case property name."""
    inferencer = container.create_name_inferencer()
    container.console.print(
        inferencer.attribute_name_to_property_name(attribute_name),
        markup=False,
        highlight=False,
    )


@click.command()
@click.argument("scope")
@click.argument("attribute_name")
@click.pass_obj
def qualify_command(
    container: DependencyContainer, scope: str, attribute_name: str
) -> None:
    """Qualify ATTRIBUTE_NAME with SCOPE, e.g. "com.example.Widget" "foo"."""
    inferencer = container.create_name_inferencer()
    container.console.print(
        inferencer.qualified_attribute_name(scope, attribute_name),
        markup=False,
        highlight=False,
    )
