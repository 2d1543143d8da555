"""CLI entry point for ring-tracker."""

import click

from . import __version__
from .commands.advance import advance
from .commands.init import init
from .commands.log import log
from .commands.login import login
from .commands.program import program
from .commands.seed import seed, seed_delete
from .commands.serve import serve
from .commands.stats import stats


@click.group()
@click.version_option(version=__version__, prog_name="ring-tracker")
def main():
    """ring-tracker: workout tracker for an 18-week rings calisthenics program.

    Example usage:

        # Initialize the database
        ring-tracker init

        # Create your account and get an API token
        ring-tracker login you@example.com

        # Log today's session
        ring-tracker log push-1 --email you@example.com

        # Review progress and move on when the week is done
        ring-tracker stats --email you@example.com
        ring-tracker advance --email you@example.com
    """
    pass


# Register commands
main.add_command(init)
main.add_command(serve)
main.add_command(login)
main.add_command(program)
main.add_command(log)
main.add_command(stats)
main.add_command(advance)
main.add_command(seed)
main.add_command(seed_delete)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
