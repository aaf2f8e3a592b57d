"""
Image upload endpoint and service.
"""

import io

import pytest
from fastapi import UploadFile

from socialhub.api.dependencies.services import get_upload_service
from socialhub.api.main import app
from socialhub.shared.core.exceptions import ValidationError
from socialhub.shared.services.upload_service import UploadService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class TestUploadEndpoint:

    async def test_upload_image(self, client, make_user, storage):
        ada = await make_user("ada")

        response = await client.post(
            "/upload",
            files={"imageUrl": ("avatar.PNG", PNG_BYTES, "image/png")},
            headers=ada["headers"],
        )

        assert response.status_code == 200
        url = response.json()["fileUrl"]
        assert url.startswith("https://cdn.example.com/appcrud/")
        assert url.endswith(".png")
        assert list(storage.objects.values()) == [PNG_BYTES]

    async def test_disallowed_format(self, client, make_user, storage):
        ada = await make_user("ada")

        response = await client.post(
            "/upload",
            files={"imageUrl": ("notes.pdf", b"%PDF-1.4", "application/pdf")},
            headers=ada["headers"],
        )

        assert response.status_code == 400
        assert storage.objects == {}

    async def test_missing_file(self, client, make_user):
        ada = await make_user("ada")

        response = await client.post(
            "/upload",
            files={"other": ("a.png", PNG_BYTES, "image/png")},
            headers=ada["headers"],
        )

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "No file uploaded"

    async def test_oversized_upload_is_rejected(self, client, make_user, storage):
        ada = await make_user("ada")
        app.dependency_overrides[get_upload_service] = lambda: UploadService(storage, max_bytes=8)
        try:
            response = await client.post(
                "/upload",
                files={"imageUrl": ("big.png", PNG_BYTES, "image/png")},
                headers=ada["headers"],
            )
        finally:
            app.dependency_overrides.pop(get_upload_service, None)

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "File is too large"
        assert storage.objects == {}

    async def test_requires_token(self, client):
        response = await client.post(
            "/upload", files={"imageUrl": ("a.png", PNG_BYTES, "image/png")}
        )

        assert response.status_code == 401


class TestUploadService:

    async def test_file_too_large(self, storage):
        service = UploadService(storage, max_bytes=4)

        with pytest.raises(ValidationError, match="too large"):
            await service.upload_image(PNG_BYTES, "a.png", "image/png")

        assert storage.objects == {}

    async def test_empty_file(self, storage):
        service = UploadService(storage)

        with pytest.raises(ValidationError, match="No file uploaded"):
            await service.upload_image(b"", "a.png")

    def test_keys_live_under_the_upload_folder(self, storage):
        key = storage.build_key("photo.JPG")

        assert key.startswith("appcrud/")
        assert key.endswith(".jpg")
        assert storage.public_url(key) == f"https://cdn.example.com/{key}"

    async def test_declared_size_over_limit_is_not_read(self, storage):
        service = UploadService(storage, max_bytes=4)
        stream = io.BytesIO(PNG_BYTES)
        upload = UploadFile(file=stream, filename="a.png", size=len(PNG_BYTES))

        with pytest.raises(ValidationError, match="too large"):
            await service.upload_form_file(upload)

        assert stream.tell() == 0
        assert storage.objects == {}

    async def test_undeclared_size_reads_one_byte_past_limit(self, storage):
        service = UploadService(storage, max_bytes=4)
        stream = io.BytesIO(PNG_BYTES)
        upload = UploadFile(file=stream, filename="a.png")

        with pytest.raises(ValidationError, match="too large"):
            await service.upload_form_file(upload)

        assert stream.tell() == 5

    async def test_form_file_within_limit_is_stored(self, storage):
        service = UploadService(storage)
        upload = UploadFile(file=io.BytesIO(PNG_BYTES), filename="a.png")

        stored = await service.upload_form_file(upload)

        assert storage.objects[stored.key] == PNG_BYTES
