"""
Utility modules for the deployment gateway.

This package contains helpers that are used across different parts of the
application.
"""

from .branch import BRANCH_NAME_PATTERN, is_valid_branch, validate_branch

__all__ = ["BRANCH_NAME_PATTERN", "is_valid_branch", "validate_branch"]
