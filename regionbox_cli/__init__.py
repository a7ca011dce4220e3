"""
regionbox CLI - Command-line interface for region containment checks.

This package holds everything around the geometry core: console input,
number parsing, configuration, structured logging and the entry point.

Usage:
    regionbox                      # interactive menu
    regionbox check --rectangle 0 10 0 5 --point 5 2
    regionbox check --config config/check_example.yaml
"""

__version__ = "1.0.0"
