"""The ``promptis`` command: small interactive demos of each prompt style."""

import click

from promptis import __version__
from promptis.logging import setup_logging

from .demos import bounds_cmd, choose_cmd, closing_cmd, data_cmd, reading_cmd, run_cmd


@click.group(context_settings={"max_content_width": 120})
@click.version_option(__version__, prog_name="promptis")
def main() -> None:
    """Try out promptis prompts in your terminal.

    \b
    Each subcommand is a short interactive program built on promptis.Prompter.
    """
    setup_logging()


main.add_command(data_cmd)
main.add_command(reading_cmd)
main.add_command(choose_cmd)
main.add_command(closing_cmd)
main.add_command(bounds_cmd)
main.add_command(run_cmd)


if __name__ == "__main__":
    main()
