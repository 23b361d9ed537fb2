"""Hanvitt CLI: financial calculators, wealth ledger and contact requests."""

import click

from hanvitt import __version__


@click.group()
@click.version_option(version=__version__, package_name="hanvitt")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("--log-level", default=None, help="Override logging.level (DEBUG, INFO, WARNING...).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """Hanvitt: savings, insurance and financial health calculators."""
    from hanvitt.core.config import Config
    from hanvitt.core.exceptions import ConfigurationError
    from hanvitt.core.utils.logging import setup_logging_from_config

    try:
        config = Config(config_file=config_file)
        if log_level:
            config.set("logging.level", log_level)
        settings = config.validated()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    setup_logging_from_config(config)
    ctx.obj = {"config_file": config_file, "config": config, "settings": settings}


# Register subcommands
from .calc_cmd import dime, health, insurance, retirement, savings, score, term
from .contact_cmd import contact
from .ledger_cmd import ledger

for _command in (savings, retirement, health, term, insurance, score, dime, ledger, contact):
    main.add_command(_command)
