"""Repository gardening tasks.

Currently ships the issue triage task:
- settings loaded from the environment / `.env`
- structured logging
- plugin, platform and priority labels derived from issue form bodies
"""

__version__ = "0.1.0"

from repo_gardening.config import GardeningSettings

__all__ = ["__version__", "GardeningSettings"]
