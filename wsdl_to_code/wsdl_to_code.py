import json
import logging

import click

from . import __version__
from .cli_utils import reconstruct_command_line
from .pipeline import CodeGeneratorConfig, GeneratorError, OutputLayout, OutputMode, PipelineGenerator, load_tree
from .pipeline.config import normalize_namespace


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--namespace", "-n", default=None, type=str, help="Package the generated modules are imported from")
@click.option(
    "--layout",
    "-l",
    default=None,
    type=click.Choice([layout.value for layout in OutputLayout]),
    help="Output layout (default: package)",
)
@click.option("--indent", default=None, type=str, help="Indentation string of the generated code")
@click.option(
    "--expand-arguments",
    is_flag=True,
    default=False,
    help="Declare explicit operation parameters instead of *args",
)
@click.option(
    "--skip-argument-check",
    is_flag=True,
    default=False,
    help="Do not generate the argument-shape check of service calls",
)
@click.option("--runtime-module", default=None, type=str, help="Module the generated services import their runtime from")
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def wsdl_to_code(
    config,
    namespace,
    layout,
    indent,
    expand_arguments,
    skip_argument_check,
    runtime_module,
    force,
    verbose,
    path,
    output,
):
    """Generate message classes and service clients from the flattened service tree PATH into OUTPUT."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if namespace is not None:
        config.namespace = normalize_namespace(namespace)
    if layout is not None:
        config.layout = OutputLayout(layout)
    if indent is not None:
        config.indent = indent
    if expand_arguments:
        config.expand_method_arguments = True
    if skip_argument_check:
        config.skip_argument_check = True
    if runtime_module is not None:
        config.runtime_module = runtime_module
    if force:
        config.output.mode = OutputMode.FORCE

    generation_comment = f"Generated by wsdl_to_code v{__version__} : {reconstruct_command_line(wsdl_to_code)}"

    try:
        tree = load_tree(path)
        written = PipelineGenerator(tree, config).save(output, generation_comment)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {len(written)} files in {output}")
