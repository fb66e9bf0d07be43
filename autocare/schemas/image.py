"""
Pydantic schemas for service images.
"""
from pydantic import BaseModel
from typing import Optional
import enum

# Visibility scope meaning "every customer"
ALL_CUSTOMERS = "all"


class ImageCategory(str, enum.Enum):
    """Image library category enumeration."""
    GENERAL = "general"
    SERVICE = "service"
    PARTS = "parts"
    INSPECTION = "inspection"
    DIAGNOSTICS = "diagnostics"


class TaskImage(BaseModel):
    """Image attached directly to a service task."""
    url: str
    title: str = ""
    category: Optional[str] = None
    customer_id: Optional[str] = None


class SharedImage(BaseModel):
    """Image in the shared library, visible to one customer or to all."""
    id: Optional[str] = None
    url: str
    title: str = ""
    category: Optional[str] = None
    customer_id: str = ALL_CUSTOMERS
    created_at: Optional[str] = None


class SharedImageCreate(BaseModel):
    """Schema for uploading an image to the library."""
    url: str
    title: str
    category: ImageCategory = ImageCategory.GENERAL
    customer_id: str = ALL_CUSTOMERS
