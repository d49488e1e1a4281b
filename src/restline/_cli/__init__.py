import click

from .cli_inspect import inspect


@click.group()
@click.version_option(package_name="restline")
def cli() -> None:
    """Compile and inspect declarative HTTP interfaces."""
    pass


cli.add_command(inspect)
