"""Steering behaviours, combined steering, flocking and headless scenarios for 2D agents."""

__version__ = "0.1.0"

__all__ = [
    "agent",
    "behaviors",
    "cli",
    "combined",
    "combined_app",
    "flock",
    "flocking",
    "flocking_app",
    "helpers",
    "path_follow",
    "sandbox",
    "smart_agent",
    "spatial",
    "steering_app",
]