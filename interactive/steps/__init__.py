"""Dialogue steps."""

from interactive.steps.package_manager_step import run_package_manager_step
from interactive.steps.project_step import run_project_step
from interactive.steps.services_step import run_services_step

__all__ = ["run_project_step", "run_package_manager_step", "run_services_step"]
