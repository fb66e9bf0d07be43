"""
Staff service reminders.
"""
import logging
import uuid
from datetime import date
from typing import Callable, Optional

from autocare.repository import CustomerRepository, ReminderRepository
from autocare.schemas.notification import NotificationDetails
from autocare.schemas.reminder import Reminder, ReminderCreate
from autocare.services.notifications import Notifier

logger = logging.getLogger(__name__)


class ReminderService:
    """Creates reminders and sends them to customers as notifications."""

    def __init__(
        self,
        reminders: ReminderRepository,
        customers: CustomerRepository,
        notifier: Notifier,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.reminders = reminders
        self.customers = customers
        self.notifier = notifier
        self._today = today

    def create(self, data: ReminderCreate) -> Optional[Reminder]:
        """New reminder for a customer's vehicle, or None if either is unknown."""
        customer = self.customers.get(data.customer_id)
        vehicle = customer.find_vehicle(data.vehicle_id) if customer else None
        if customer is None or vehicle is None:
            logger.warning("Reminder not created: customer %s or vehicle %s not found",
                           data.customer_id, data.vehicle_id)
            return None
        reminder = Reminder(
            id=f"reminder_{uuid.uuid4().hex[:12]}",
            customer_id=customer.id,
            customer_name=customer.full_name,
            vehicle_info=f"{vehicle.year} {vehicle.make} {vehicle.model} ({vehicle.license_plate})",
            service=data.service,
            due_date=data.due_date,
        )
        return self.reminders.add(reminder)

    def send(self, reminder_id: str) -> Optional[Reminder]:
        """
        Stamp the reminder as sent today and notify the customer.

        The stamp is saved even when the customer record is gone; the
        notification is then skipped and logged.
        """
        reminder = self.reminders.get(reminder_id)
        if reminder is None:
            return None
        reminder.last_reminded = self._today().isoformat()
        self.reminders.update(reminder)
        self.notifier.notify(
            reminder.customer_id,
            f"Reminder: Your {reminder.service} is due on {reminder.due_date}",
            NotificationDetails(type="service_reminder"),
        )
        logger.info("Reminder %s sent to %s", reminder.id, reminder.customer_id)
        return reminder
