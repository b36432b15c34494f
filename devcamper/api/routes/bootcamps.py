"""
Bootcamp endpoints.

- ``GET    /bootcamps``             list with filtering, select, sort, pagination
- ``GET    /bootcamps/{id}``        single bootcamp
- ``POST   /bootcamps``             create
- ``PUT    /bootcamps/{id}``        partial update
- ``DELETE /bootcamps/{id}``        delete
- ``PUT    /bootcamps/{id}/photo``  photo upload (multipart field ``file``)
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from devcamper.api.params import RawParams, get_raw_params
from devcamper.api.routes.deps import get_bootcamp_service, get_upload_service
from devcamper.schemas import (
    BootcampCreate,
    BootcampUpdate,
    DataResponse,
    ListResponse,
)
from devcamper.services import BootcampService, PhotoUploadService

router = APIRouter(prefix="/bootcamps", tags=["bootcamps"])

Document = Dict[str, Any]


@router.get("", response_model=ListResponse[Document])
async def get_bootcamps(
    raw_params: RawParams = Depends(get_raw_params),
    service: BootcampService = Depends(get_bootcamp_service),
) -> ListResponse[Document]:
    documents, pagination = await service.list(raw_params)
    return ListResponse[Document].from_page(documents, pagination)


@router.get("/{bootcamp_id}", response_model=DataResponse[Document])
async def get_bootcamp(
    bootcamp_id: str,
    service: BootcampService = Depends(get_bootcamp_service),
) -> DataResponse[Document]:
    return DataResponse[Document](data=await service.get(bootcamp_id))


@router.post(
    "", response_model=DataResponse[Document], status_code=status.HTTP_201_CREATED
)
async def create_bootcamp(
    payload: BootcampCreate,
    service: BootcampService = Depends(get_bootcamp_service),
) -> DataResponse[Document]:
    return DataResponse[Document](data=await service.create(payload))


@router.put("/{bootcamp_id}", response_model=DataResponse[Document])
async def update_bootcamp(
    bootcamp_id: str,
    payload: BootcampUpdate,
    service: BootcampService = Depends(get_bootcamp_service),
) -> DataResponse[Document]:
    return DataResponse[Document](data=await service.update(bootcamp_id, payload))


@router.delete("/{bootcamp_id}", response_model=DataResponse[Document])
async def delete_bootcamp(
    bootcamp_id: str,
    service: BootcampService = Depends(get_bootcamp_service),
) -> DataResponse[Document]:
    await service.delete(bootcamp_id)
    return DataResponse[Document](data={})


@router.put("/{bootcamp_id}/photo", response_model=DataResponse[str])
async def bootcamp_photo_upload(
    bootcamp_id: str,
    file: Optional[UploadFile] = File(None),
    service: BootcampService = Depends(get_bootcamp_service),
    uploads: PhotoUploadService = Depends(get_upload_service),
) -> DataResponse[str]:
    await service.get(bootcamp_id)
    filename = await uploads.save(bootcamp_id, file)
    await service.set_photo(bootcamp_id, filename)
    return DataResponse[str](data=filename)
