"""
Record store and typed repositories.

The store is a plain key-value layer: a JSON document per (kind, owner_id),
read in full and written back in full, last writer wins. Documents that
fail to parse or validate are logged and treated as absent.
"""
from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from autocare.events import EventBus, RecordChanged
from autocare.models.record import StoredRecord
from autocare.schemas.customer import CustomerRecord
from autocare.schemas.image import SharedImage, SharedImageCreate
from autocare.schemas.reminder import Reminder
from autocare.services.calculator import compute_progress

logger = logging.getLogger(__name__)

CUSTOMER_KIND = "customer"
IMAGES_KIND = "shared_images"
IMAGES_OWNER = "global"
REMINDERS_KIND = "reminders"
REMINDERS_OWNER = "global"
ADMIN_ROLE = "admin"


class RecordStore(ABC):
    """Key-value document store keyed by record kind and owner id."""

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self._bus = bus

    @abstractmethod
    def _read(self, kind: str, owner_id: str) -> Optional[str]:
        ...

    @abstractmethod
    def _write(self, kind: str, owner_id: str, raw: str) -> None:
        ...

    @abstractmethod
    def owners(self, kind: str) -> list[str]:
        """Owner ids holding a document of `kind`, in a stable order."""

    def get(self, kind: str, owner_id: str) -> Optional[Any]:
        """Parsed document, or None when missing or malformed."""
        raw = self._read(kind, owner_id)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.error("Malformed %s record for %s: %s", kind, owner_id, e)
            return None

    def put(self, kind: str, owner_id: str, value: Any) -> None:
        """Overwrite the whole document and broadcast the change."""
        self._write(kind, owner_id, json.dumps(value))
        if self._bus is not None:
            self._bus.publish(RecordChanged(kind=kind, owner_id=owner_id))


class MemoryRecordStore(RecordStore):
    """Store holding raw JSON strings in a dict, like browser local storage."""

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        super().__init__(bus)
        self._data: dict[tuple[str, str], str] = {}

    def _read(self, kind, owner_id):
        return self._data.get((kind, owner_id))

    def _write(self, kind, owner_id, raw):
        self._data[(kind, owner_id)] = raw

    def owners(self, kind):
        return [owner for (k, owner) in self._data if k == kind]

    def set_raw(self, kind: str, owner_id: str, raw: str) -> None:
        """Place an unparsed document, bypassing serialization."""
        self._data[(kind, owner_id)] = raw


class SqlRecordStore(RecordStore):
    """Store backed by the `records` table."""

    def __init__(self, db: Session, bus: Optional[EventBus] = None) -> None:
        super().__init__(bus)
        self.db = db

    def _read(self, kind, owner_id):
        row = self.db.get(StoredRecord, (kind, owner_id))
        return row.payload if row is not None else None

    def _write(self, kind, owner_id, raw):
        row = self.db.get(StoredRecord, (kind, owner_id))
        if row is None:
            self.db.add(StoredRecord(kind=kind, owner_id=owner_id, payload=raw))
        else:
            row.payload = raw
        self.db.commit()

    def owners(self, kind):
        result = self.db.execute(
            select(StoredRecord.owner_id).where(StoredRecord.kind == kind).order_by(StoredRecord.owner_id)
        )
        return list(result.scalars().all())


class CustomerRepository:
    """Typed access to customer records."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def get(self, owner_id: str) -> Optional[CustomerRecord]:
        data = self.store.get(CUSTOMER_KIND, owner_id)
        if data is None:
            return None
        try:
            return CustomerRecord.model_validate(data)
        except ValidationError as e:
            logger.error("Invalid customer record for %s: %s", owner_id, e)
            return None

    def put(self, owner_id: str, record: CustomerRecord) -> None:
        """Save the whole record. Every `progress` field is recomputed first."""
        for entry in record.service_progress:
            entry.progress = compute_progress(entry.tasks)
        self.store.put(CUSTOMER_KIND, owner_id, record.model_dump(mode="json"))

    def iter_customers(self, include_admins: bool = False) -> Iterator[tuple[str, CustomerRecord]]:
        """Readable customer records; unreadable ones are skipped."""
        for owner_id in self.store.owners(CUSTOMER_KIND):
            record = self.get(owner_id)
            if record is None:
                continue
            if not include_admins and record.role == ADMIN_ROLE:
                continue
            yield owner_id, record

    def find_progress_owner(self, appointment_id: str) -> Optional[tuple[str, CustomerRecord]]:
        """Owner whose record holds progress for `appointment_id`."""
        for owner_id, record in self.iter_customers():
            if record.find_progress(appointment_id) is not None:
                return owner_id, record
        return None


class ImageRepository:
    """The shared service image library."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list(self, category: Optional[str] = None) -> list[SharedImage]:
        data = self.store.get(IMAGES_KIND, IMAGES_OWNER)
        if not isinstance(data, list):
            if data is not None:
                logger.error("Shared image pool is not a list, ignoring it")
            return []
        images = []
        for item in data:
            try:
                images.append(SharedImage.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid shared image: %s", e)
        if category:
            images = [img for img in images if img.category == category]
        return images

    def add(self, image: SharedImageCreate) -> SharedImage:
        """Prepend a new image to the library."""
        now = datetime.now(timezone.utc)
        new_image = SharedImage(
            id=f"img_{time.time_ns() // 1_000}",
            url=image.url,
            title=image.title,
            category=image.category.value,
            customer_id=image.customer_id,
            created_at=now.isoformat(),
        )
        self._save([new_image, *self.list()])
        logger.info("Image %s added to library (%s)", new_image.id, new_image.category)
        return new_image

    def delete(self, image_id: str) -> bool:
        images = self.list()
        remaining = [img for img in images if img.id != image_id]
        if len(remaining) == len(images):
            return False
        self._save(remaining)
        logger.info("Image %s removed from library", image_id)
        return True

    def _save(self, images: list[SharedImage]) -> None:
        self.store.put(IMAGES_KIND, IMAGES_OWNER, [img.model_dump(mode="json") for img in images])


class ReminderRepository:
    """Staff service reminders, kept as one list."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list(self) -> list[Reminder]:
        data = self.store.get(REMINDERS_KIND, REMINDERS_OWNER)
        if not isinstance(data, list):
            if data is not None:
                logger.error("Reminder list is not a list, ignoring it")
            return []
        reminders = []
        for item in data:
            try:
                reminders.append(Reminder.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid reminder: %s", e)
        return reminders

    def get(self, reminder_id: str) -> Optional[Reminder]:
        return next((r for r in self.list() if r.id == reminder_id), None)

    def add(self, reminder: Reminder) -> Reminder:
        self.save([*self.list(), reminder])
        return reminder

    def update(self, reminder: Reminder) -> bool:
        reminders = self.list()
        for i, existing in enumerate(reminders):
            if existing.id == reminder.id:
                reminders[i] = reminder
                self.save(reminders)
                return True
        return False

    def save(self, reminders: list[Reminder]) -> None:
        self.store.put(REMINDERS_KIND, REMINDERS_OWNER, [r.model_dump(mode="json") for r in reminders])
