"""Custom exceptions for recursive-include."""


class RecursiveIncludeError(Exception):
    """Base exception for recursive-include."""


class RootDirectoryError(RecursiveIncludeError):
    """Traversal root does not exist or is not a directory."""


class BuildNotFoundError(RecursiveIncludeError):
    """Root directory has no saved build graph in the registry."""


class DuplicateModuleError(RecursiveIncludeError):
    """Module name already registered for a different directory."""

    def __init__(self, name: str, existing_dir: str, new_dir: str):
        self.name = name
        self.existing_dir = existing_dir
        self.new_dir = new_dir
        super().__init__(
            f"Module '{name}' is already included from '{existing_dir}', "
            f"cannot include it again from '{new_dir}'"
        )


class RegistryValidationError(RecursiveIncludeError):
    """Registry file is invalid or malformed."""


class RegistryVersionError(RecursiveIncludeError):
    """Registry version is unsupported."""