"""Click options."""

import click

debug = click.option(
    "--debug",
    count=True,
    envvar="DEBUG",
    help="Supply once to display iackit debug logs. "
    "Supply twice to also display tracebacks of failed steps.",
)

no_color = click.option(
    "--no-color",
    default=False,
    envvar="IACKIT_NO_COLOR",
    is_flag=True,
    help="Disable color in iackit's logs.",
)

step = click.option(
    "--step",
    default="execute",
    envvar="IACKIT_STEP",
    metavar="<step>",
    show_default=True,
    help="Name of the runner step to run.",
)

verbose = click.option(
    "--verbose",
    default=False,
    envvar="VERBOSE",
    is_flag=True,
    help="Display iackit verbose logs.",
)
