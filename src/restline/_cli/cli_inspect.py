import importlib
import json
import logging
import os
import sys

import click
from dotenv import load_dotenv

from .._config import ContractConfig
from .._utils._logs import setup_logging
from ..contract import Contract
from ..models.errors import ContractError

logger = logging.getLogger(__name__)

DOTENV_FILE = ".env"


def load_interface(target: str) -> type:
    """Import ``package.module:ClassName``."""
    module_name, separator, class_name = target.partition(":")
    if not separator or not module_name or not class_name:
        raise click.BadParameter(
            f"expected 'module:ClassName', got {target!r}", param_hint="TARGET"
        )

    # interfaces usually live in the project being inspected
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"cannot import {module_name!r}: {e}", param_hint="TARGET"
        ) from e

    interface = getattr(module, class_name, None)
    if not isinstance(interface, type):
        raise click.BadParameter(
            f"{class_name!r} is not a class in {module_name!r}", param_hint="TARGET"
        )
    return interface


@click.command()
@click.argument("target", required=True)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def inspect(target: str, verbose: bool) -> None:
    """Compile an interface and print the metadata of each of its methods."""
    setup_logging(should_debug=verbose)
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), DOTENV_FILE), override=True)

    interface = load_interface(target)
    config = ContractConfig.from_env()
    logger.debug(f"Compiling {target} with {config.model_dump()}")

    try:
        compiled = Contract(config).parse_and_validate_interface(interface)
    except ContractError as e:
        click.echo(f"Error: {e.message}", err=True)
        click.get_current_context().exit(1)

    output = {key: metadata.describe() for key, metadata in compiled.items()}
    click.echo(json.dumps(output, indent=2))
