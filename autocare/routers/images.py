"""
Service image library routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from autocare.auth import require_admin
from autocare.dependencies import get_images
from autocare.repository import ImageRepository
from autocare.schemas.image import ImageCategory, SharedImage, SharedImageCreate

router = APIRouter(prefix="/images", tags=["images"])


@router.get("/", response_model=List[SharedImage])
def get_images_list(
    category: Optional[ImageCategory] = None,
    images: ImageRepository = Depends(get_images),
    role: str = Depends(require_admin)
):
    """
    Get the image library, optionally filtered by category.
    """
    return images.list(category.value if category else None)


@router.post("/", response_model=SharedImage, status_code=status.HTTP_201_CREATED)
def upload_image(
    image: SharedImageCreate,
    images: ImageRepository = Depends(get_images),
    role: str = Depends(require_admin)
):
    """
    Add an image to the library.
    """
    if not image.title.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please provide an image title"
        )
    return images.add(image)


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_image(
    image_id: str,
    images: ImageRepository = Depends(get_images),
    role: str = Depends(require_admin)
):
    """
    Remove an image from the library.
    """
    if not images.delete(image_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Image not found"
        )
    return None
