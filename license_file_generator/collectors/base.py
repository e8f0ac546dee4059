"""Base collector interface."""

from abc import ABC, abstractmethod

from license_file_generator.models.dependency import ProjectOptions, ProjectSnapshot


class BaseCollector(ABC):
    """Abstract base class for dependency metadata collectors.

    All collectors must inherit from this class and implement
    the async collect() method.
    """

    @abstractmethod
    async def collect(self, options: ProjectOptions) -> ProjectSnapshot:
        """Collect license metadata for a project's dependencies.

        Args:
            options: Project directory and dependency selection options.

        Returns:
            Mapping of dependency name to DependencyRecord, in the order
            the dependencies should be reported.
        """
