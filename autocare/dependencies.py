"""
FastAPI dependency providers.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from autocare.config import Settings, get_settings
from autocare.database import get_db
from autocare.events import get_event_bus
from autocare.repository import (
    CustomerRepository, ImageRepository, RecordStore, ReminderRepository, SqlRecordStore,
)
from autocare.services.notifications import Notifier
from autocare.services.progress import ProgressService
from autocare.services.reminders import ReminderService


def get_store(db: Session = Depends(get_db)) -> RecordStore:
    return SqlRecordStore(db, bus=get_event_bus())


def get_customers(store: RecordStore = Depends(get_store)) -> CustomerRepository:
    return CustomerRepository(store)


def get_images(store: RecordStore = Depends(get_store)) -> ImageRepository:
    return ImageRepository(store)


def get_notifier(customers: CustomerRepository = Depends(get_customers)) -> Notifier:
    return Notifier(customers)


def get_progress_service(
    customers: CustomerRepository = Depends(get_customers),
    images: ImageRepository = Depends(get_images),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> ProgressService:
    return ProgressService(customers, images, notifier, settings)


def get_reminders(store: RecordStore = Depends(get_store)) -> ReminderRepository:
    return ReminderRepository(store)


def get_reminder_service(
    reminders: ReminderRepository = Depends(get_reminders),
    customers: CustomerRepository = Depends(get_customers),
    notifier: Notifier = Depends(get_notifier),
) -> ReminderService:
    return ReminderService(reminders, customers, notifier)
