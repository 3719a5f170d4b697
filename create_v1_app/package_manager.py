"""Supported JavaScript package managers."""

from create_v1_app.errors import UnsupportedPackageManagerError

PACKAGE_MANAGERS = ("npm", "yarn", "pnpm", "bun")
DEFAULT_PACKAGE_MANAGER = "npm"


def validate_package_manager(package_manager: str) -> str:
    """Return the normalized name, or raise UnsupportedPackageManagerError."""
    name = package_manager.strip().lower()
    if name not in PACKAGE_MANAGERS:
        raise UnsupportedPackageManagerError(
            f"Unsupported package manager {package_manager!r} "
            f"(expected one of: {', '.join(PACKAGE_MANAGERS)})"
        )
    return name


def parse_package_manager_field(value: str | None) -> str:
    """Extract the manager name from a package.json packageManager field.

    "pnpm@9.1.0" -> "pnpm". Missing or unknown values fall back to npm.
    """
    if not value:
        return DEFAULT_PACKAGE_MANAGER
    name = value.split("@", 1)[0].strip().lower()
    return name if name in PACKAGE_MANAGERS else DEFAULT_PACKAGE_MANAGER


def confirm_package_manager(package_manager: str | None) -> str:
    """Use the given package manager, or ask for one when it is None."""
    if package_manager is not None:
        return validate_package_manager(package_manager)

    from interactive.steps.package_manager_step import ask_package_manager

    selected = ask_package_manager()
    if selected is None:
        raise UnsupportedPackageManagerError("No package manager selected")
    return selected
