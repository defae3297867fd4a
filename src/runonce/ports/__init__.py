"""Port interfaces for RunOnce.

Ports define the contracts that adapters must implement. Application logic
depends only on these abstractions, not concrete implementations.
"""

from runonce.ports.launcher import LaunchRequest, ProcessLauncherPort

__all__ = [
    "LaunchRequest",
    "ProcessLauncherPort",
]
