"""/api/collector - collector CRUD"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Response

from collection_gateway.api.dependencies import get_repositories
from collection_gateway.api.routes.schemas import CollectorRequest, CollectorResponse
from collection_gateway.domain.exceptions import EntityNotFoundError
from collection_gateway.domain.models import Collector
from collection_gateway.domain.repositories import Repositories

router = APIRouter()


@router.get("/collector", response_model=List[CollectorResponse])
def list_collectors(repositories: Repositories = Depends(get_repositories)):
    """Collectors in the order the scheduler tries them"""
    return [CollectorResponse.from_domain(c) for c in repositories.collectors.list()]


@router.post("/collector", response_model=CollectorResponse, status_code=201)
def create_collector(request_body: CollectorRequest, repositories: Repositories = Depends(get_repositories)):
    collector = Collector(id=str(uuid.uuid4()), **request_body.model_dump())
    return CollectorResponse.from_domain(repositories.collectors.insert(collector))


@router.get("/collector/{collector_id}", response_model=CollectorResponse)
def get_collector(collector_id: str, repositories: Repositories = Depends(get_repositories)):
    collector = repositories.collectors.get(collector_id)
    if not collector:
        raise EntityNotFoundError("Collector", collector_id)
    return CollectorResponse.from_domain(collector)


@router.put("/collector/{collector_id}", response_model=CollectorResponse)
def replace_collector(
    collector_id: str,
    request_body: CollectorRequest,
    repositories: Repositories = Depends(get_repositories),
):
    # Already booked appointments are not re-checked against the new seniority
    updated = repositories.collectors.update(Collector(id=collector_id, **request_body.model_dump()))
    if not updated:
        raise EntityNotFoundError("Collector", collector_id)
    return CollectorResponse.from_domain(updated)


@router.delete("/collector/{collector_id}", status_code=204)
def delete_collector(collector_id: str, repositories: Repositories = Depends(get_repositories)):
    if not repositories.collectors.delete(collector_id):
        raise EntityNotFoundError("Collector", collector_id)
    return Response(status_code=204)
