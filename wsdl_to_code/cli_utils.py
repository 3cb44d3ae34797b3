"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

COMMAND_NAME = "wsdl_to_code"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    # Try to get current Click context for parameter values
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return COMMAND_NAME

    if not cli_args:
        return COMMAND_NAME

    arguments = []  # Positional arguments
    options = []

    for param in click_command.params:
        if param.name not in cli_args:
            continue

        value = cli_args[param.name]
        if value is None or value is False:
            continue

        # Paths are shown by file name only
        if isinstance(value, (str, Path)) and isinstance(param.type, click.Path):
            formatted_value = Path(str(value)).name
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)

        elif isinstance(param, click.Option):
            # Skip if it's the default value
            if value == param.default:
                continue

            # Get the primary option name (first in opts list)
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, formatted_value])

    return " ".join([COMMAND_NAME, *arguments, *options])
