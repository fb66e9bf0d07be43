"""
Customer notifications.
"""
import logging
import uuid
from datetime import datetime
from typing import Callable, Optional

from autocare.repository import CustomerRepository
from autocare.schemas.customer import CustomerRecord
from autocare.schemas.notification import Notification, NotificationDetails

logger = logging.getLogger(__name__)


class Notifier:
    """Appends notifications to customer records and tracks read state."""

    def __init__(self, customers: CustomerRepository, now: Callable[[], datetime] = datetime.now) -> None:
        self.customers = customers
        self._now = now

    def build(self, message: str, details: Optional[NotificationDetails] = None) -> Notification:
        return Notification(
            id=uuid.uuid4().hex,
            message=message,
            date=self._now().strftime("%Y-%m-%d %H:%M"),
            read=False,
            details=details,
        )

    def attach(self, record: CustomerRecord, message: str,
               details: Optional[NotificationDetails] = None) -> Notification:
        """Add a notification to an already loaded record; the caller saves it."""
        notification = self.build(message, details)
        record.notifications.append(notification)
        return notification

    def notify(self, owner_id: str, message: str,
               details: Optional[NotificationDetails] = None) -> Optional[Notification]:
        record = self.customers.get(owner_id)
        if record is None:
            logger.warning("Cannot notify %s: no customer record", owner_id)
            return None
        notification = self.attach(record, message, details)
        self.customers.put(owner_id, record)
        return notification

    def mark_read(self, owner_id: str, notification_id: str) -> bool:
        record = self.customers.get(owner_id)
        if record is None:
            return False
        for notification in record.notifications:
            if notification.id == notification_id:
                if not notification.read:
                    notification.read = True
                    self.customers.put(owner_id, record)
                return True
        return False

    def mark_all_read(self, owner_id: str) -> int:
        """Mark everything read; returns how many were unread."""
        record = self.customers.get(owner_id)
        if record is None:
            return 0
        unread = [n for n in record.notifications if not n.read]
        for notification in unread:
            notification.read = True
        if unread:
            self.customers.put(owner_id, record)
        return len(unread)

    def unread_count(self, owner_id: str) -> int:
        record = self.customers.get(owner_id)
        if record is None:
            return 0
        return sum(1 for n in record.notifications if not n.read)
