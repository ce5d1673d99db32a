"""
Tests for FileStorageService (disk) and FileService (upload coordination).
"""

import os

import pytest

from zapzup_manager.application.dto import FileUpload
from zapzup_manager.domain.exceptions import DomainValidationError


def test_save_and_delete(file_storage):
    path = file_storage.save_file(b"hello", "icons", "../../etc/passwd")

    assert os.path.dirname(path).endswith(os.path.join("uploads", "icons"))
    assert path.endswith("etc_passwd")
    with open(path, "rb") as f:
        assert f.read() == b"hello"
    assert file_storage.delete_file(path) is True
    assert file_storage.delete_file(path) is False
    assert not os.path.exists(path)


def test_unsafe_only_filename_gets_placeholder(file_storage):
    path = file_storage.save_file(b"x", "icons", "///", make_unique=False)

    assert os.path.basename(path) == "unnamed_file"


def test_no_upload_yields_no_file(file_service, file_repository):
    assert file_service.store_file(None) is None
    assert file_repository.files == {}


@pytest.mark.asyncio
async def test_stored_upload_is_registered_separately(file_service, file_repository):
    stored = file_service.store_file(
        FileUpload(filename="a.jpg", content_type="image/jpeg", content=b"jpeg")
    )

    assert stored.size_bytes == 4
    assert os.path.exists(stored.storage_path)
    assert file_repository.files == {}

    await file_service.register_file(stored)

    assert file_repository.files[stored.id.value] is stored


@pytest.mark.asyncio
async def test_discard_removes_row_and_bytes(file_service, file_repository):
    stored = file_service.store_file(
        FileUpload(filename="a.png", content_type="image/png", content=b"png")
    )
    await file_service.register_file(stored)

    await file_service.discard_file(stored)

    assert file_repository.files == {}
    assert not os.path.exists(stored.storage_path)


@pytest.mark.asyncio
async def test_discard_of_unregistered_file_removes_bytes(file_service, file_repository):
    stored = file_service.store_file(
        FileUpload(filename="a.png", content_type="image/png", content=b"png")
    )

    await file_service.discard_file(stored)

    assert file_repository.files == {}
    assert not os.path.exists(stored.storage_path)


@pytest.mark.parametrize(
    "upload",
    [
        FileUpload(filename="a.exe", content_type="application/x-msdownload", content=b"MZ"),
        FileUpload(filename="empty.png", content_type="image/png", content=b""),
        FileUpload(
            filename="big.png",
            content_type="image/png",
            content=b"0" * (1024 * 1024 + 1),
        ),
    ],
    ids=["type", "empty", "too-large"],
)
def test_invalid_uploads_are_rejected(file_service, tmp_path, upload):
    with pytest.raises(DomainValidationError):
        file_service.store_file(upload)

    assert not (tmp_path / "uploads" / "icons").exists()
