# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - jobs.py: Job challenge and application endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import jobs

__all__ = [
    "jobs",
]
