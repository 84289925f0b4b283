"""Command-line interface for gpuaccel.

    gpuaccel transform style.css -o style.gpu.css
    gpuaccel inspect style.css --exclude .no-gpu
"""

import click

from gpuaccel import __version__
from gpuaccel.cli.inspect import inspect
from gpuaccel.cli.transform import transform

COMMANDS = (transform, inspect)


@click.group(
    commands=COMMANDS,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-V", "--version", prog_name="gpuaccel")
def cli() -> None:
    """Inject GPU-acceleration hints into CSS stylesheets.

    Rule blocks that declare a targeted property (animation, transition by
    default) receive transform, will-change, backface-visibility and
    perspective declarations.
    """
