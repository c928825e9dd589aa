import json
import logging

import click

from .config import OutputMode, TableConfigGeneratorConfig
from .generator import TableConfigGenerator
from .merger import ConflictPolicy
from .schema import parse_api_document


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--mode",
    "-m",
    default=None,
    type=click.Choice([m.value for m in OutputMode]),
    help="How to handle existing output files (default: merge)",
)
@click.option(
    "--conflict",
    default=None,
    type=click.Choice([p.value for p in ConflictPolicy]),
    help="How generated and existing declarations are reconciled in merge mode",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every decision taken while generating")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(file_okay=False, resolve_path=True))
def table_config_codegen(config, mode, conflict, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path, encoding="utf-8") as f:
        document = json.load(f)

    if config is not None:
        with open(config, encoding="utf-8") as f:
            config = TableConfigGeneratorConfig.from_dict(json.load(f))
    else:
        config = TableConfigGeneratorConfig()

    # CLI flags override the config file
    if mode is not None:
        config.output.mode = OutputMode(mode)
    if conflict is not None:
        config.conflict_policy = ConflictPolicy(conflict)

    graph = parse_api_document(document)
    generator = TableConfigGenerator(graph, config, output)

    for written in generator.run():
        click.echo(f"Wrote {written}")
