# =============================================================================
# core/ - Backend Access Package
# =============================================================================
# This package contains the gateway's backend-facing logic:
# - models/: Pydantic schemas for request and response bodies
# - services/: One class per resource, each issuing Supabase calls and
#   translating failures into BackendError
# =============================================================================
