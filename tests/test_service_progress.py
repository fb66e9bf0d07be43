import unittest

from autocare.config import Settings
from autocare.repository import CUSTOMER_KIND
from autocare.schemas.customer import AppointmentCreate
from autocare.schemas.image import SharedImageCreate
from autocare.schemas.task import TaskStatus
from autocare.services.progress import apply_task_status, compute_progress

from tests.helpers import TODAY, build_service, make_customer, make_task


class TestApplyTaskStatus(unittest.TestCase):

    def apply(self, task, status, technician=None, stamp=False):
        return apply_task_status(task, status, technician, today=TODAY,
                                 default_technician="Service Technician",
                                 stamp_date_on_in_progress=stamp)

    def test_completed_stamps_date_and_technician(self):
        task = self.apply(make_task(), TaskStatus.COMPLETED, "Ravi")
        self.assertEqual(task.status, TaskStatus.COMPLETED)
        self.assertEqual(task.completed_date, "2024-03-15")
        self.assertEqual(task.technician, "Ravi")

    def test_default_technician_placeholder(self):
        task = self.apply(make_task(), TaskStatus.COMPLETED)
        self.assertEqual(task.technician, "Service Technician")

    def test_in_progress_leaves_date_alone(self):
        task = self.apply(make_task(completed_date="2024-01-01"), TaskStatus.IN_PROGRESS, "Ravi")
        self.assertEqual(task.technician, "Ravi")
        self.assertEqual(task.completed_date, "2024-01-01")

    def test_in_progress_stamps_date_when_configured(self):
        task = self.apply(make_task(), TaskStatus.IN_PROGRESS, stamp=True)
        self.assertEqual(task.completed_date, "2024-03-15")

    def test_pending_to_completed_is_allowed(self):
        task = self.apply(make_task(status=TaskStatus.PENDING), TaskStatus.COMPLETED)
        self.assertEqual(task.status, TaskStatus.COMPLETED)

    def test_back_to_pending_only_changes_status(self):
        task = make_task(status=TaskStatus.COMPLETED, completed_date="2024-01-01", technician="Ravi")
        self.apply(task, TaskStatus.PENDING)
        self.assertEqual(task.status, TaskStatus.PENDING)
        self.assertEqual(task.completed_date, "2024-01-01")
        self.assertEqual(task.technician, "Ravi")


class TestProgressService(unittest.TestCase):

    def setUp(self):
        self.store, self.service = build_service()
        self.customers = self.service.customers
        self.customers.put("cust_42", make_customer())

    def assert_in_sync(self, owner_id="cust_42"):
        record = self.customers.get(owner_id)
        for entry in record.service_progress:
            self.assertEqual(entry.progress, compute_progress(entry.tasks))

    def test_ensure_progress_provisions_and_persists(self):
        entry = self.service.ensure_progress("cust_42", "appt-1")
        self.assertEqual(
            [t.title for t in entry.tasks],
            ["Vehicle Inspection", "Oil Change", "AC Service", "Final Inspection"],
        )
        self.assertEqual(entry.vehicle_id, "v-1")
        stored = self.customers.get("cust_42").find_progress("appt-1")
        self.assertEqual([t.id for t in stored.tasks], [t.id for t in entry.tasks])

    def test_ensure_progress_is_stable(self):
        first = self.service.ensure_progress("cust_42", "appt-1")
        second = self.service.ensure_progress("cust_42", "appt-1")
        self.assertEqual([t.id for t in first.tasks], [t.id for t in second.tasks])
        self.assertEqual(len(self.customers.get("cust_42").service_progress), 1)

    def test_ensure_progress_unknown_owner_or_appointment(self):
        self.assertIsNone(self.service.ensure_progress("nobody", "appt-1"))
        self.assertIsNone(self.service.ensure_progress("cust_42", "appt-404"))

    def test_completing_a_task_updates_progress(self):
        entry = self.service.ensure_progress("cust_42", "appt-1")
        task_id = entry.tasks[0].id

        updated = self.service.set_task_status("appt-1", task_id, TaskStatus.COMPLETED, "Ravi")

        self.assertEqual(updated.tasks[0].completed_date, "2024-03-15")
        self.assertEqual(updated.progress, 25)
        stored = self.customers.get("cust_42").find_progress("appt-1")
        self.assertEqual(stored.progress, 25)
        self.assertEqual(stored.tasks[0].technician, "Ravi")

    def test_every_mutation_keeps_progress_in_sync(self):
        entry = self.service.ensure_progress("cust_42", "appt-1")
        self.assert_in_sync()
        for task, status in zip(entry.tasks, [TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS,
                                              TaskStatus.COMPLETED, TaskStatus.PENDING]):
            self.service.set_task_status("appt-1", task.id, status)
            self.assert_in_sync()
        self.assertEqual(self.customers.get("cust_42").find_progress("appt-1").progress, 58)

    def test_accepts_plain_status_strings(self):
        entry = self.service.ensure_progress("cust_42", "appt-1")
        updated = self.service.set_task_status("appt-1", entry.tasks[1].id, "in-progress")
        self.assertEqual(updated.tasks[1].status, TaskStatus.IN_PROGRESS)

    def test_status_change_notifies_customer(self):
        entry = self.service.ensure_progress("cust_42", "appt-1")
        task = entry.tasks[1]
        self.service.set_task_status("appt-1", task.id, TaskStatus.IN_PROGRESS)

        notifications = self.customers.get("cust_42").notifications
        self.assertEqual(len(notifications), 1)
        self.assertEqual(notifications[-1].message, "Service update: Oil Change is now In Progress")
        self.assertFalse(notifications[-1].read)
        self.assertEqual(notifications[-1].details.type, "service_progress")
        self.assertEqual(notifications[-1].details.appointment_id, "appt-1")
        self.assertEqual(notifications[-1].details.task_id, task.id)

    def test_missing_parent_record_is_a_no_op(self):
        with self.assertLogs("autocare.services.progress", level="WARNING"):
            self.assertIsNone(self.service.set_task_status("appt-404", "t1", TaskStatus.COMPLETED))

    def test_missing_task_is_a_no_op(self):
        self.service.ensure_progress("cust_42", "appt-1")
        before = self.customers.get("cust_42")
        self.assertIsNone(self.service.set_task_status("appt-1", "no-such-task", TaskStatus.COMPLETED))
        self.assertEqual(self.customers.get("cust_42"), before)

    def test_stamp_on_in_progress_setting(self):
        _, service = build_service(settings=Settings(stamp_date_on_in_progress=True))
        service.customers.put("cust_42", make_customer())
        entry = service.ensure_progress("cust_42", "appt-1")
        updated = service.set_task_status("appt-1", entry.tasks[0].id, TaskStatus.IN_PROGRESS)
        self.assertEqual(updated.tasks[0].completed_date, "2024-03-15")

    def test_appointment_in_progress_provisions_tasks(self):
        appointment = self.service.update_appointment_status("cust_42", "appt-1", "In Progress")
        self.assertEqual(appointment.status, "In Progress")
        record = self.customers.get("cust_42")
        entry = record.find_progress("appt-1")
        self.assertEqual(len(entry.tasks), 4)
        self.assertEqual(entry.progress, 0)
        self.assertEqual(record.notifications[-1].details.type, "appointment_status")

    def test_other_appointment_status_does_not_provision(self):
        self.service.update_appointment_status("cust_42", "appt-1", "Confirmed")
        self.assertIsNone(self.customers.get("cust_42").find_progress("appt-1"))

    def test_appointment_status_for_unknown_appointment(self):
        self.assertIsNone(self.service.update_appointment_status("cust_42", "appt-404", "Completed"))
        self.assertIsNone(self.service.update_appointment_status("nobody", "appt-1", "Completed"))

    def test_book_appointment(self):
        booking = AppointmentCreate(services=["Oil Change", "Diagnostics"], date="2024-04-01", time="09:00")
        appointment = self.service.book_appointment("cust_42", booking)
        self.assertEqual(appointment.service, "Oil Change, Diagnostics")
        self.assertEqual(appointment.status, "Scheduled")
        self.assertIsNotNone(self.customers.get("cust_42").find_appointment(appointment.id))

    def test_customer_view_resolves_images(self):
        self.service.images.add(SharedImageCreate(url="u-oil", title="Oil Change", category="service"))
        self.service.images.add(SharedImageCreate(url="u-private", title="AC Service", category="service",
                                                  customer_id="cust_99"))
        self.service.ensure_progress("cust_42", "appt-1")

        views = self.service.customer_view("cust_42")
        by_title = {t.title: t for t in views[0].tasks}
        self.assertEqual([i.url for i in by_title["Oil Change"].resolved_images], ["u-oil"])
        self.assertEqual(by_title["AC Service"].resolved_images, [])

    def test_customer_view_unknown_customer(self):
        self.assertIsNone(self.service.customer_view("nobody"))

    def test_overview_skips_admins_and_broken_records(self):
        admin = make_customer("admin", appointment_id="appt-9")
        admin.role = "admin"
        self.customers.put("admin", admin)
        self.service.ensure_progress("admin", "appt-9")
        self.service.ensure_progress("cust_42", "appt-1")
        self.store.set_raw(CUSTOMER_KIND, "broken", "{not json")

        rows = self.service.overview()

        self.assertEqual([(r.owner_id, r.appointment_id) for r in rows], [("cust_42", "appt-1")])
        self.assertEqual(rows[0].customer_name, "Jane Smith")
        self.assertEqual(rows[0].vehicle, "Honda Civic (ABC-123)")
        self.assertEqual(rows[0].service, "Oil Change, AC Service")


if __name__ == '__main__':
    unittest.main()
