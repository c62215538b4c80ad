"""Applied-filter reconciliation and label resolution for resource list filter controls."""

__version__ = "1.0.0"
