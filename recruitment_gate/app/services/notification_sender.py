from abc import ABC, abstractmethod
from typing import Optional


class INotificationSender(ABC):
    """Transactional email capability"""

    @abstractmethod
    async def send(
        self, to: str, subject: str, text_body: str, html_body: Optional[str] = None
    ) -> bool:
        """Send an email. Returns True on delivery, False on any failure."""
        pass
