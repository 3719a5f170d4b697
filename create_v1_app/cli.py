"""Command-line grammar: `new`, `add service`, or no command for the dialogue."""

import argparse
from typing import Any, Sequence

from create_v1_app.app import create_new_app
from create_v1_app.package_manager import DEFAULT_PACKAGE_MANAGER, PACKAGE_MANAGERS
from create_v1_app.services import Service, add_services, parse_services
from create_v1_app.settings import get_setting
from create_v1_app.templates import resolve_templates_root

PROG = "create-v1-app"


def _verbose_parent(default: object) -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log every rendered and copied file.",
    )
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Create a new V1 app, or add services to an existing one.",
        parents=[_verbose_parent(False)],
    )
    # Subcommands accept --verbose too, without resetting a flag given earlier.
    sub_parent = _verbose_parent(argparse.SUPPRESS)
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    new = commands.add_parser("new", help="Create a new V1 app", parents=[sub_parent])
    new.add_argument("name", help="The name of the new project")
    new.add_argument(
        "--services",
        nargs="+",
        metavar="SERVICE",
        help=f"Services to add to the project ({', '.join(s.value for s in Service)})",
    )
    new.add_argument(
        "--package-manager",
        choices=PACKAGE_MANAGERS,
        help="The package manager to use for the project",
    )
    new.add_argument(
        "--install",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Install dependencies after generating the project",
    )

    add = commands.add_parser(
        "add", help="Add a service to an existing V1 app", parents=[sub_parent]
    )
    add_commands = add.add_subparsers(dest="add_command", metavar="WHAT", required=True)
    service = add_commands.add_parser(
        "service", help="Add a service to an existing V1 app", parents=[sub_parent]
    )
    service.add_argument("service_name", help="The name of the service to add")

    return parser


def parse_cli(args: Sequence[str]) -> argparse.Namespace:
    """Parse forwarded arguments. Exits via argparse on usage errors and --help."""
    return build_parser().parse_args(list(args))


def dispatch(ns: argparse.Namespace, settings: dict[str, Any]) -> None:
    """Run the parsed command."""
    templates_dir = get_setting(settings, "templates_dir")
    templates_root = resolve_templates_root(templates_dir)

    if ns.command == "new":
        package_manager = (
            ns.package_manager
            or get_setting(settings, "package_manager")
            or DEFAULT_PACKAGE_MANAGER
        )
        install = ns.install
        if install is None:
            install = bool(get_setting(settings, "install_dependencies", False))
        create_new_app(
            ns.name,
            parse_services(ns.services),
            package_manager,
            templates_root=templates_root,
            install=install,
        )
    elif ns.command == "add":
        add_services(parse_services([ns.service_name]), templates_root=templates_root)
    else:
        from interactive.wizard import run_dialogue

        run_dialogue(
            templates_root=templates_root,
            default_package_manager=get_setting(settings, "package_manager"),
            install=bool(get_setting(settings, "install_dependencies", False)),
        )
