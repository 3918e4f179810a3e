"""
Orchestration layer for dvwa-launcher.

Sits between the CLI (presentation) and the core host, docker and
installer layers.

Architecture:
- DeployOrchestrator: Runs the provisioning workflow step by step
- DeployConfig: Fixed deployment parameters
- DeploymentState: Facts gathered during a run, including the sudo flag
"""

from .deploy_orchestrator import DeployConfig, DeployOrchestrator, DeploymentState

__all__ = ["DeployConfig", "DeployOrchestrator", "DeploymentState"]
