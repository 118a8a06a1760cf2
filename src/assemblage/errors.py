__all__ = [
    "AssemblyError",
    "InvalidArgument",
    "DependencyError",
    "UnsatisfiedDependencyError",
    "CircularDependencyError",
]


class AssemblyError(Exception):
    """Base class for every error raised while assembling a system."""

    pass


class InvalidArgument(AssemblyError):
    """Raised when a definition, dependency map, factory or slot is malformed."""

    pass


class DependencyError(AssemblyError):
    """Raised when the dependency graph between units cannot be resolved."""

    pass


class UnsatisfiedDependencyError(DependencyError):
    """Raised when a unit references another unit that was never declared.

    Attributes:
        unit_name: The unit declaring the dependency.
        dependency_name: The local name the dependency is bound to.
        missing_name: The name of the unit that could not be found.
    """

    def __init__(self, unit_name: str, dependency_name: str, missing_name: str):
        super().__init__(
            f"Unsatisfied dependency '{dependency_name}' of unit '{unit_name}'. "
            f"Unit '{missing_name}' not found."
        )
        self.unit_name = unit_name
        self.dependency_name = dependency_name
        self.missing_name = missing_name


class CircularDependencyError(DependencyError):
    """Raised when units reference each other in a cycle.

    Attributes:
        path: The unit names along the cycle, starting and ending with the same unit.
    """

    def __init__(self, path: list[str]):
        super().__init__(
            f"Circular dependency (->: depends on): {' -> '.join(path)}"
        )
        self.path = path
