"""
Command implementations for the relay service.
"""

from .health_check_command import HealthCheckCommand
from .relay_command import RelayCommand, is_missing_command

__all__ = ["HealthCheckCommand", "RelayCommand", "is_missing_command"]
