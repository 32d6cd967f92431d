"""Core services for the streak card generator: settings, GitHub data and logging."""

from .config import (
    ActionConfig,
    ConfigError,
    load_action_config,
    load_config_file,
    save_config,
    validate_action_config,
)
from .github import (
    ContributionCalendar,
    ContributionDay,
    GitHubApiError,
    GitHubClient,
    compute_streaks,
    fetch_streak_data,
)
from .logging_setup import configure_logging, get_logger

__all__ = [
    "ActionConfig",
    "ConfigError",
    "ContributionCalendar",
    "ContributionDay",
    "GitHubApiError",
    "GitHubClient",
    "compute_streaks",
    "configure_logging",
    "fetch_streak_data",
    "get_logger",
    "load_action_config",
    "load_config_file",
    "save_config",
    "validate_action_config",
]
