"""Optional service packages and adding them to an existing project."""

import logging
from enum import Enum
from pathlib import Path

from create_v1_app.cleanup import CLEANUP_MANAGER, RemoveService
from create_v1_app.errors import ScaffoldError, TemplateNotFoundError, UnknownServiceError
from create_v1_app.package_json import add_workspace, get_package_json
from create_v1_app.templates import TemplateRenderer, resolve_templates_root
from create_v1_app.workspace import process_workspace, service_workspace

logger = logging.getLogger(__name__)


class Service(str, Enum):
    ANALYTICS = "analytics"
    EMAIL = "email"
    JOBS = "jobs"
    KV = "kv"

    @property
    def help(self) -> str:
        return _SERVICE_HELP[self]

    @classmethod
    def parse(cls, name: str) -> "Service":
        try:
            return cls(name.strip().lower())
        except ValueError:
            known = ", ".join(s.value for s in cls)
            raise UnknownServiceError(
                f"Unknown service {name!r} (expected one of: {known})"
            ) from None

    def __str__(self) -> str:
        return self.value


_SERVICE_HELP: dict[Service, str] = {
    Service.ANALYTICS: "Product analytics with OpenPanel",
    Service.EMAIL: "Transactional email templates with React Email and Resend",
    Service.JOBS: "Background jobs with Trigger.dev",
    Service.KV: "Key-value store and rate limiting with Upstash Redis",
}


def parse_services(values: list[str] | None) -> list[Service]:
    """Parse service names; accepts repeated values and comma-separated lists.

    Duplicates are dropped, first occurrence wins.
    """
    services: list[Service] = []
    for value in values or []:
        for part in value.split(","):
            if not part.strip():
                continue
            service = Service.parse(part)
            if service not in services:
                services.append(service)
    return services


def add_services(
    services: list[Service],
    *,
    cwd: Path | None = None,
    templates_root: Path | None = None,
) -> list[Path]:
    """Add service packages to the V1 app rooted at cwd. Returns the new package dirs."""
    project_dir = cwd or Path.cwd()
    root = templates_root or resolve_templates_root()
    pkg = get_package_json(project_dir)
    renderer = TemplateRenderer(root)
    context = {
        "project_name": pkg.name,
        "package_manager": pkg.package_manager,
        "services": [s.value for s in services],
    }

    workspaces = []
    for service in services:
        workspace = service_workspace(root, project_dir, service.value)
        if not workspace.source_path.is_dir():
            raise TemplateNotFoundError(f"Service template not found for: {service}")
        if workspace.dest_path.exists():
            raise ScaffoldError(f"Service {service} already exists at {workspace.dest_path}")
        workspaces.append(workspace)

    created: list[Path] = []
    for workspace in workspaces:
        CLEANUP_MANAGER.add_task(RemoveService(project_dir, workspace.name))
        logger.info("Adding service: %s", workspace.name)
        process_workspace(workspace, renderer, context, pkg.package_manager)
        add_workspace(project_dir, f"packages/{workspace.name}")
        created.append(workspace.dest_path)
    return created
