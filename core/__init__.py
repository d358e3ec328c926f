# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the job application logic:
# - models/: Pydantic schemas for challenges, results and submissions
# - jobs/: Job challenges and the slug registry
# - services/: Outbound notifications
#
# Only services/ reads application settings; jobs/ and models/ have no
# FastAPI dependency and can be tested in isolation.
# =============================================================================
