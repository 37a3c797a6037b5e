import os

import pytest

from src.infrastructure.storage import FileStorageService


@pytest.fixture()
def file_storage(tmp_path):
    return FileStorageService(
        upload_base=str(tmp_path),
        public_base_url="https://cdn.test/files/",
        max_upload_mb=1,
    )


@pytest.mark.asyncio
async def test_upload_writes_file_and_returns_public_url(file_storage, tmp_path):
    url = await file_storage.upload("report.pdf", b"%PDF-1.4", "application/pdf")

    assert url.startswith("https://cdn.test/files/attachments/")
    assert url.endswith("_report.pdf")
    stored = os.listdir(tmp_path / "attachments")
    assert len(stored) == 1
    assert (tmp_path / "attachments" / stored[0]).read_bytes() == b"%PDF-1.4"


@pytest.mark.asyncio
async def test_upload_sanitizes_path_components(file_storage, tmp_path):
    await file_storage.upload("../../etc/pass wd?.txt", b"x")

    [stored] = os.listdir(tmp_path / "attachments")
    assert stored.endswith("_pass wd_.txt")


@pytest.mark.asyncio
async def test_oversized_upload_is_rejected(file_storage, tmp_path):
    with pytest.raises(ValueError):
        await file_storage.upload("big.bin", b"0" * (1024 * 1024 + 1))

    assert not (tmp_path / "attachments").exists()
