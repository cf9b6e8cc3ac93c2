import re

from app.domain.errors import BranchValidationError

# Branch names double as script arguments and URL path segments.
BRANCH_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def is_valid_branch(branch: str) -> bool:
    return bool(BRANCH_NAME_PATTERN.fullmatch(branch))


def validate_branch(branch) -> str:
    """
    Check a branch name supplied by a client.

    Returns:
        The branch name, unchanged

    Raises:
        BranchValidationError: the name is missing or contains characters
            outside [A-Za-z0-9_-]
    """
    if branch is None or branch == "":
        raise BranchValidationError("Branch name is required")
    if not isinstance(branch, str) or not is_valid_branch(branch):
        raise BranchValidationError("Invalid branch name")
    return branch
