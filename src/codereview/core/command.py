from abc import ABC, abstractmethod

class Command(ABC):
    """Base class for console commands."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def handle(self) -> None:
        """Execute the command.

        Failures are raised, not reported; the console entry point decides
        how they map to an exit status.
        """
        pass
