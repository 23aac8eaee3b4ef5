"""CLI commands for tempo."""
