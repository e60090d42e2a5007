"""Abstract base class for calendar transformers."""

from abc import ABC, abstractmethod
from typing import Any

from agenda.calendar import EventCalendar


class BaseTransformer(ABC):
    """Abstract base class defining the interface for calendar transformers.

    Extend this class to implement exporters for other output formats
    (e.g., JSON, CSV, a remote calendar API).
    """

    @abstractmethod
    def transform(self, calendar: EventCalendar) -> Any:
        """Transform every event in the calendar into the target format.

        Args:
            calendar: Calendar whose events are exported.

        Returns:
            Transformed data in the target format.
        """
        pass

    @abstractmethod
    def save(self, output_path: str) -> None:
        """Save the transformed data to a file.

        Args:
            output_path: Path to the output file.
        """
        pass
