"""Run the maintenance command: pysitemaint on|off|info."""

__author__ = "The pysitemaint maintainers"
__copyright__ = "Copyright (C) 2026, The pysitemaint maintainers"
__maintainer__ = "The pysitemaint maintainers"

import argparse
import logging
import sys

from .controller import MaintenanceController
from .exceptions import MaintenanceError
from .settings import MaintenanceSettings

logger = logging.getLogger("pysitemaint")


def positive_int(value: str) -> int:
    """Parse a positive number of minutes for --duration."""

    try:
        minutes = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid duration -> '{}'".format(value)) from None

    if minutes <= 0:
        raise argparse.ArgumentTypeError("duration must be a positive number of minutes")

    return minutes


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""

    parser = argparse.ArgumentParser(prog="pysitemaint", description="Handle maintenance mode.")
    parser.add_argument("--site-root", help="Install root of the web site (holds the .maintenance file)")
    parser.add_argument("--content-dir", help="Content root of the web site (holds maintenance.php)")

    commands = parser.add_subparsers(dest="command", required=True, metavar="{on,off,info}")

    activate = commands.add_parser("on", help="Activate maintenance mode.")
    activate.add_argument(
        "--duration",
        type=positive_int,
        help="Maintenance duration in minutes. If not specified, maintenance stays on until deactivation.",
    )
    activate.add_argument(
        "--template",
        help="Maintenance template to display. Relative paths are evaluated in the content directory.",
    )

    commands.add_parser("off", help="Deactivate maintenance mode.")
    commands.add_parser("info", help="Check maintenance mode.")

    return parser


def get_controller(settings: MaintenanceSettings) -> MaintenanceController:
    """Get an instance of a MaintenanceController for the configured site.

    Args:
        settings (MaintenanceSettings):
            The settings of the web site.

    Returns:
        MaintenanceController:
            A new controller object.

    """

    return MaintenanceController(
        site_root=settings.site_root,
        content_dir=settings.content_dir,
        marker_file=settings.marker_file,
        template_file=settings.template_file,
        tool_name=settings.tool_name,
        logger=logger,
    )


def exec_command(
    controller: MaintenanceController,
    command: str,
    duration: int | None = None,
    template: str | None = None,
) -> str:
    """Dispatch a command to the controller.

    Args:
        controller (MaintenanceController):
            The controller of the web site.
        command (str):
            One of "on", "off" or "info".
        duration (int | None, optional):
            Duration in minutes for "on".
        template (str | None, optional):
            Custom template for "on".

    Returns:
        str:
            The message to display.

    Raises:
        ValueError:
            For an unknown command.
        MaintenanceError:
            If the command failed.

    """

    if command == "on":
        return controller.activate(duration=duration, template=template)
    elif command == "off":
        return controller.deactivate()
    elif command == "info":
        return controller.status().message
    else:
        raise ValueError("Unknown maintenance command -> '{}'".format(command))


def main(argv: list[str] | None = None) -> int:
    """Start the maintenance command."""

    args = build_parser().parse_args(argv)

    overrides = {}
    if args.site_root:
        overrides["site_root"] = args.site_root
    if args.content_dir:
        overrides["content_dir"] = args.content_dir

    settings = MaintenanceSettings(**overrides)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%d-%b-%Y %H:%M:%S",
        level=settings.loglevel,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    controller = get_controller(settings)

    try:
        message = exec_command(
            controller,
            args.command,
            duration=getattr(args, "duration", None),
            template=getattr(args, "template", None),
        )
    except MaintenanceError as error:
        logger.debug("Command -> '%s' failed", args.command, exc_info=True)
        print("Error: {}".format(error), file=sys.stderr)
        return 1

    if args.command == "info":
        print(message)
    else:
        print("Success: {}".format(message))

    return 0


if __name__ == "__main__":
    sys.exit(main())
