"""Exceptions raised while generating or extending a V1 app."""

from pathlib import Path


class ScaffoldError(Exception):
    """Base exception for all create-v1-app errors."""


class ProjectExistsError(ScaffoldError):
    """Raised when the target project directory already exists and is not empty."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory {path} already exists and is not empty")
        self.path = path


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template directory is missing."""


class TemplateRenderError(ScaffoldError):
    """Raised when a template fails to render."""

    def __init__(self, template_name: str, reason: str) -> None:
        super().__init__(f"Failed to render template {template_name}: {reason}")
        self.template_name = template_name


class PackageJsonError(ScaffoldError):
    """Raised when package.json is missing or cannot be parsed."""


class InstallError(ScaffoldError):
    """Raised when the package manager install command fails."""


class UnknownServiceError(ScaffoldError):
    """Raised for a service name that has no template."""


class UnsupportedPackageManagerError(ScaffoldError):
    """Raised for a package manager other than npm, yarn, pnpm or bun."""


class InvalidProjectNameError(ScaffoldError):
    """Raised for a project name that is not a plain directory name."""
