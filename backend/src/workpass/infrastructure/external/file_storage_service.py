"""
LocalFileStorageService
Validates credential uploads and writes them unmodified to the upload directory
"""
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import aiofiles
from fastapi import UploadFile
from loguru import logger

from workpass.core.config import settings
from workpass.core.exceptions import ValidationException


PUBLIC_PREFIX = "/uploads"


@dataclass(frozen=True)
class StoredFile:
    """Reference to a staged upload, as recorded on the credential row"""
    url: str
    name: str
    size: int


class LocalFileStorageService:
    """Local filesystem storage service"""

    def __init__(
        self,
        base_path: Optional[str] = None,
        allowed_extensions: Optional[List[str]] = None,
        max_size_bytes: Optional[int] = None
    ):
        """
        Initialize file storage service

        Args:
            base_path: Directory uploads are written to (default from settings)
            allowed_extensions: Lower-case extensions including the dot
            max_size_bytes: Largest accepted upload
        """
        self.base_path = Path(base_path or settings.UPLOAD_DIR)
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.allowed_extensions = allowed_extensions or settings.ALLOWED_UPLOAD_EXTENSIONS
        self.max_size_bytes = max_size_bytes or settings.max_upload_size_bytes

    async def save_file(self, file: UploadFile) -> StoredFile:
        """
        Save an uploaded file under a random name

        Raises:
            ValidationException: missing file, disallowed extension or too large
        """
        extension, size = self._validate_file(file)

        filename = f"{secrets.token_hex(16)}{extension}"
        file_path = self.base_path / filename

        try:
            async with aiofiles.open(file_path, "wb") as f:
                content = await file.read()
                await f.write(content)
        except OSError as e:
            logger.error(f"Error saving upload {file.filename}: {e}")
            raise

        logger.info(f"File saved: {file_path} ({size} bytes)")
        return StoredFile(url=f"{PUBLIC_PREFIX}/{filename}", name=file.filename, size=size)

    async def delete_file(self, stored: StoredFile) -> bool:
        """Remove a staged upload whose credential was never recorded"""
        file_path = self.base_path / Path(stored.url).name
        if not file_path.exists():
            return False
        try:
            file_path.unlink()
            logger.info(f"File deleted: {file_path}")
            return True
        except OSError as e:
            logger.error(f"Error deleting file {file_path}: {e}")
            return False

    def _validate_file(self, file: Optional[UploadFile]):
        if file is None or not file.filename:
            raise ValidationException("file", "No file uploaded")

        extension = Path(file.filename).suffix.lower()
        if extension not in self.allowed_extensions:
            raise ValidationException(
                "file",
                f"Invalid file type. Only {', '.join(self.allowed_extensions)} allowed."
            )

        # Size from the spooled file, then rewind for the copy
        file.file.seek(0, 2)
        size = file.file.tell()
        file.file.seek(0)

        if size > self.max_size_bytes:
            raise ValidationException(
                "file",
                f"File too large. Maximum size is {self.max_size_bytes // (1024 * 1024)}MB."
            )
        return extension, size
