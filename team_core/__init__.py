"""
team_core package: participant models, gender/age balanced team partitioning,
team statistics, roster IO, validation and exports.
"""
__all__ = [
    "constants",
    "models",
    "fairness",
    "partition",
    "stats",
    "io",
    "validation",
    "config",
    "export_pdf",
    "ui_helpers",
]
