# =============================================================================
# core/jobs/ - Job Challenges
# =============================================================================
# - base.py: JobChallenge interface
# - intern_junior.py: Intern/Junior Developer challenge
# - registry.py: slug -> challenge lookup
# =============================================================================

from .base import JobChallenge
from .intern_junior import InternJuniorChallenge
from .registry import get_all_jobs, get_job_challenge, list_slugs

__all__ = [
    "JobChallenge",
    "InternJuniorChallenge",
    "get_all_jobs",
    "get_job_challenge",
    "list_slugs",
]
