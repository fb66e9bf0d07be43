import unittest

from autocare.repository import (
    REMINDERS_KIND, REMINDERS_OWNER, CustomerRepository, MemoryRecordStore, ReminderRepository,
)
from autocare.schemas.reminder import ReminderCreate
from autocare.services.notifications import Notifier
from autocare.services.reminders import ReminderService

from tests.helpers import TODAY, make_customer


class TestReminderService(unittest.TestCase):

    def setUp(self):
        self.store = MemoryRecordStore()
        self.customers = CustomerRepository(self.store)
        self.customers.put("cust_42", make_customer())
        self.reminders = ReminderRepository(self.store)
        self.service = ReminderService(self.reminders, self.customers, Notifier(self.customers),
                                       today=lambda: TODAY)

    def create(self, **kwargs):
        data = {"customer_id": "cust_42", "vehicle_id": "v-1", "due_date": "2024-04-30"}
        data.update(kwargs)
        return self.service.create(ReminderCreate(**data))

    def test_create_fills_customer_and_vehicle(self):
        reminder = self.create()
        self.assertEqual(reminder.customer_name, "Jane Smith")
        self.assertEqual(reminder.vehicle_info, "2020 Honda Civic (ABC-123)")
        self.assertEqual(reminder.service, "General Service")
        self.assertIsNone(reminder.last_reminded)
        self.assertEqual(self.reminders.list(), [reminder])

    def test_create_for_unknown_customer_or_vehicle(self):
        self.assertIsNone(self.create(customer_id="nobody"))
        self.assertIsNone(self.create(vehicle_id="v-404"))
        self.assertEqual(self.reminders.list(), [])

    def test_send_stamps_date_and_notifies(self):
        reminder = self.create(service="Oil Change")
        sent = self.service.send(reminder.id)

        self.assertEqual(sent.last_reminded, "2024-03-15")
        self.assertEqual(self.reminders.get(reminder.id).last_reminded, "2024-03-15")
        notification = self.customers.get("cust_42").notifications[-1]
        self.assertEqual(notification.message, "Reminder: Your Oil Change is due on 2024-04-30")
        self.assertEqual(notification.details.type, "service_reminder")
        self.assertFalse(notification.read)

    def test_send_when_customer_is_gone(self):
        reminder = self.create()
        self.store.set_raw("customer", "cust_42", "{broken")
        sent = self.service.send(reminder.id)
        self.assertEqual(sent.last_reminded, "2024-03-15")

    def test_send_unknown_reminder(self):
        self.assertIsNone(self.service.send("missing"))

    def test_new_reminders_are_appended(self):
        first = self.create(service="Oil Change")
        second = self.create(service="AC Service")
        self.assertEqual([r.id for r in self.reminders.list()], [first.id, second.id])

    def test_malformed_reminder_list_is_empty(self):
        self.store.set_raw(REMINDERS_KIND, REMINDERS_OWNER, "not json")
        self.assertEqual(self.reminders.list(), [])


if __name__ == '__main__':
    unittest.main()
