"""
API routes: thin adapters that delegate to :class:`NetworkService`.

Errors raised by the service are turned into HTTP 400 responses by the
handlers registered in :func:`elnet.api.app.create_app`.
"""
from __future__ import annotations

import warnings

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from elnet.api.models import BondsResponse, NetworkRequest, NetworkResponse
from elnet.core.schemas import NetworkConfig
from elnet.core.service import NetworkService

router = APIRouter()

# One service instance per process; it keeps the last network built.
_service = NetworkService()


def get_service() -> NetworkService:
    return _service


@router.post("/network", response_model=NetworkResponse)
def build_network(req: NetworkRequest):
    svc = get_service()
    cfg = NetworkConfig(
        cutoff=req.cutoff,
        spring_constant=req.spring_constant,
        box=req.box,
        dim=req.dim,
        n_particles=len(req.coordinates),
        offset=req.offset,
        method=req.method,
    )
    coordinates = [row[: req.dim] for row in req.coordinates]
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        summary = svc.build_network(cfg, coordinates)
    return {
        "summary": summary.to_dict(),
        "bonds": [b.to_dict() for b in svc.get_bonds()],
        "warnings": [str(w.message) for w in caught],
    }


@router.get("/bonds", response_model=BondsResponse)
def get_bonds():
    return {"bonds": [b.to_dict() for b in get_service().get_bonds()]}


@router.get("/bonds/text", response_class=PlainTextResponse)
def get_bonds_text():
    return get_service().to_text()
