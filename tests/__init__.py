# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_auth.py: Bearer token handling and scoped clients
# - test_entries.py / test_profile.py / test_catalog.py: Endpoint behaviour
# - test_errors.py: Error envelopes
# - test_config.py / test_health.py: Ambient plumbing
#
# Run tests with: pytest
# =============================================================================
