# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Enerlab Jobs API:
# - test_intern_junior.py: Intern/Junior challenge rules and hints
# - test_registry.py: Slug registry
# - test_validation.py: Hint generation helpers
# - test_notifications.py: Slack notification service
# - test_config.py: Settings loading and startup validation
# - test_api.py: HTTP endpoints
#
# Run tests with: pytest
# =============================================================================
