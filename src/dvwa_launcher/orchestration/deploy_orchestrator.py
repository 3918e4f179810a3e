#!/usr/bin/env python3
"""
Deploy Orchestrator - Coordinates the DVWA provisioning workflow.

Steps, strictly in order and fail-fast:
1. Detect the host distribution
2. Install Docker if it is missing
3. Start and enable the Docker service if it is inactive
4. Add the user to the docker group, escalating docker calls with sudo
5. Stop containers publishing the target port
6. Pull the image
7. Run the image in the foreground until the operator interrupts it

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rich.markup import escape

from dvwa_launcher.core.console import Console, SIGINT_EXIT_CODE
from dvwa_launcher.core.docker import DockerCli
from dvwa_launcher.core.errors import (
    CommandError,
    InstallationError,
    PermissionAdjustmentError,
    PortConflictError,
    PullError,
    RunError,
    ServiceError,
    create_error_context,
)
from dvwa_launcher.core.host import (
    DistroInfo,
    current_user,
    detect_distribution,
    is_root,
    user_groups,
)
from dvwa_launcher.core.service import ServiceManager
from dvwa_launcher.installers import InstallerFactory

logger = logging.getLogger(__name__)


@dataclass
class DeployConfig:
    """Fixed parameters of a deployment."""

    image: str
    port: int
    log_file: str
    os_release_path: str = "/etc/os-release"
    docker_group: str = "docker"
    service_name: str = "docker"


@dataclass
class DeploymentState:
    """Facts gathered while the deployment runs."""

    distro: Optional[DistroInfo] = None
    docker_present: bool = False
    docker_version: str = ""
    service_started: bool = False
    use_sudo: bool = False
    stopped_containers: List[str] = field(default_factory=list)


class DeployOrchestrator:
    """
    Orchestrates the deployment workflow.

    Responsibilities:
    - Make sure Docker is installed, running and usable by the user
    - Free the target port
    - Pull and run the image in the foreground
    """

    def __init__(self, config: DeployConfig, console: Optional[Console] = None):
        """
        Initialize deploy orchestrator.

        Args:
            config: Deployment parameters
            console: Console for shell commands, streams output by default
        """
        self.config = config
        self.console = console or Console(shellVerbose=False, live_output=True)
        self.state = DeploymentState()
        self.docker = DockerCli(self.console)
        self.services = ServiceManager(self.console)

    def execute(self) -> DeploymentState:
        """
        Execute the whole workflow.

        Returns:
            The final DeploymentState

        Raises:
            LauncherError: On the first failing step
        """
        self.detect_distribution()
        self.check_root()
        self.ensure_docker_installed()
        self.ensure_service_running()
        self.ensure_user_permissions()
        self.resolve_port_conflict()
        self.fetch_image()
        self.run_container()
        logger.info("Deployment completed")
        return self.state

    def check_root(self) -> None:
        """Warn when running as root."""
        if is_root():
            logger.warning(
                "[yellow]Warning: Running as root. This is not recommended.[/yellow]"
            )

    def detect_distribution(self) -> DistroInfo:
        """Read the os-release file and record the distribution."""
        distro = detect_distribution(self.config.os_release_path)
        self.state.distro = distro
        logger.info(f"Detected distribution: {distro.id}")
        return distro

    def ensure_docker_installed(self) -> bool:
        """
        Install Docker unless it is already on PATH.

        Returns:
            True if an installation was performed

        Raises:
            UnsupportedPlatformError: If the distribution has no installer
            InstallationError: If a package manager command fails
        """
        if self.docker.is_installed():
            logger.info("Docker is already installed")
            self.state.docker_present = True
            try:
                self.state.docker_version = self.docker.version()
            except CommandError as e:
                raise InstallationError(
                    f"Docker is installed but not working: {e}",
                    context=create_error_context(
                        operation="ensure_docker_installed",
                        component="DeployOrchestrator",
                        command=e.command,
                    ),
                    cause=e,
                ) from e
            return False

        logger.info("Docker is not installed")
        logger.warning("[yellow]Docker not found. Installing...[/yellow]")
        installer = InstallerFactory.create(self.state.distro, self.console)
        installer.install()
        self.state.docker_present = True
        return True

    def ensure_service_running(self) -> bool:
        """
        Start and enable the Docker service if it is inactive.

        Returns:
            True if the service was started

        Raises:
            ServiceError: If start or enable fails
        """
        service = self.config.service_name
        logger.info("Checking Docker service status...")

        if self.services.is_active(service):
            logger.info("Docker service is already running")
            return False

        logger.info("Starting Docker service...")
        try:
            self.services.start(service)
            self.services.enable(service)
        except CommandError as e:
            raise ServiceError(
                f"Could not start the {service} service: {e}",
                context=create_error_context(
                    operation="ensure_service_running",
                    component="DeployOrchestrator",
                    command=e.command,
                ),
                suggestions=[f"Inspect 'sudo journalctl -u {service}'"],
                cause=e,
            ) from e
        self.state.service_started = True
        logger.info("Docker service started")
        return True

    def ensure_user_permissions(self) -> bool:
        """
        Make sure the user can reach the Docker socket.

        Membership is checked on every run. A user outside the group is
        added to it, and docker calls for the rest of this run use sudo
        because the new membership only applies after a re-login.

        Returns:
            The resulting use_sudo flag
        """
        group = self.config.docker_group
        if group in user_groups(self.console):
            logger.info(f"User is already in the {group} group")
            self.state.use_sudo = False
        else:
            user = current_user()
            logger.info(f"Adding current user to {group} group...")
            try:
                self.console.sh(f"sudo usermod -aG {group} {user}")
                logger.warning(
                    f"[yellow]User added to {group} group. You may need to log "
                    "out and back in for this to take effect.[/yellow]"
                )
            except CommandError as e:
                error = PermissionAdjustmentError(
                    f"Could not add {user} to the {group} group: {e}",
                    cause=e,
                )
                logger.warning(f"[yellow]{escape(str(error))}[/yellow]")
            logger.warning("[yellow]For now, commands will run with sudo.[/yellow]")
            self.state.use_sudo = True

        self.docker.use_sudo = self.state.use_sudo
        return self.state.use_sudo

    def resolve_port_conflict(self, port: Optional[int] = None) -> List[str]:
        """
        Stop every running container publishing the port.

        Args:
            port: Host port to free, defaults to the configured port

        Returns:
            IDs of the stopped containers

        Raises:
            PortConflictError: If listing or stopping containers fails
        """
        port = self.config.port if port is None else port
        logger.info("Checking for existing DVWA containers...")

        try:
            conflicts = self.docker.containers_on_port(port)
        except CommandError as e:
            raise PortConflictError(
                f"Could not list running containers: {e}",
                context=create_error_context(
                    operation="resolve_port_conflict",
                    component="DeployOrchestrator",
                    command=e.command,
                ),
                cause=e,
            ) from e

        if not conflicts:
            return []

        logger.warning(
            f"[yellow]Port {port} is already in use. "
            "Stopping existing containers...[/yellow]"
        )
        stopped = []
        for container in conflicts:
            try:
                self.docker.stop(container.id)
            except CommandError as e:
                raise PortConflictError(
                    f"Could not stop container {container.id}: {e}",
                    context=create_error_context(
                        operation="resolve_port_conflict",
                        component="DeployOrchestrator",
                        command=e.command,
                    ),
                    suggestions=[f"Stop container {container.id} manually"],
                    cause=e,
                ) from e
            logger.info(f"Stopped container: {container.id}")
            stopped.append(container.id)

        self.state.stopped_containers.extend(stopped)
        return stopped

    def fetch_image(self, image: Optional[str] = None) -> None:
        """
        Pull the image.

        Raises:
            PullError: If docker pull fails
        """
        image = image or self.config.image
        logger.info("Pulling DVWA Docker image...")
        try:
            self.docker.pull(image)
        except CommandError as e:
            raise PullError(
                f"Could not pull {image}: {e}",
                context=create_error_context(
                    operation="fetch_image",
                    component="DeployOrchestrator",
                    command=e.command,
                ),
                suggestions=["Check network access to the registry"],
                cause=e,
            ) from e
        logger.info("DVWA image pulled successfully")

    def run_container(
        self, image: Optional[str] = None, port: Optional[int] = None
    ) -> None:
        """
        Run the image in the foreground until it exits or is interrupted.

        An operator interrupt is the normal way out; the container is
        removed by docker because of --rm.

        Raises:
            RunError: If docker run fails for another reason
        """
        image = image or self.config.image
        port = self.config.port if port is None else port

        logger.info("Starting DVWA container...")
        logger.info(f"[green]Starting DVWA on http://localhost:{port}[/green]")
        logger.info(
            f"[green]Logs are being saved to: {escape(self.config.log_file)}[/green]"
        )
        logger.warning("[yellow]Press Ctrl+C to stop the container[/yellow]")

        try:
            self.docker.run_foreground(image, port)
        except KeyboardInterrupt:
            logger.info("DVWA container stopped by operator")
        except CommandError as e:
            if e.exit_code == SIGINT_EXIT_CODE:
                logger.info("DVWA container stopped by operator")
                return
            raise RunError(
                f"DVWA container failed: {e}",
                context=create_error_context(
                    operation="run_container",
                    component="DeployOrchestrator",
                    command=e.command,
                ),
                suggestions=[f"Make sure nothing else listens on port {port}"],
                cause=e,
            ) from e
