"""High-level operations for recursive-include."""

from recursive_include.files.paths import normalize_root_dir
from recursive_include.operations.forget import find_build
from recursive_include.operations.forget import forget_build
from recursive_include.operations.include import apply_directives
from recursive_include.operations.include import compute_include_plan
from recursive_include.operations.include import execute_include_plan
from recursive_include.operations.include import include_recursive

__all__ = [
    "apply_directives",
    "compute_include_plan",
    "execute_include_plan",
    "find_build",
    "forget_build",
    "include_recursive",
    "normalize_root_dir",
]
