# routes/api.py
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from storefront_harness.services.audit_service import AuditService
from storefront_harness.config.settings import Config
from typing import Optional

router = APIRouter()

# Last run of each kind, kept in process memory
last_results = {}


class RunRequest(BaseModel):
    url: Optional[str] = None


def get_audit_service():
    return AuditService(Config)


def _run(kind, runner, url):
    try:
        results = runner(url)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    last_results[kind] = results
    return {"status": "success", "report": results}


@router.post('/audit')
def run_audit(request: RunRequest = RunRequest(), service: AuditService = Depends(get_audit_service)):
    return _run('audit', service.run_audit, request.url)


@router.post('/smoke')
def run_smoke(request: RunRequest = RunRequest(), service: AuditService = Depends(get_audit_service)):
    return _run('smoke', service.run_smoke, request.url)


@router.get('/results')
def get_results(kind: Optional[str] = None):
    if kind is not None:
        if kind not in last_results:
            raise HTTPException(status_code=404, detail=f"No {kind} results available. Run one first.")
        return last_results[kind]
    if not last_results:
        raise HTTPException(status_code=404, detail="No results available. Run an audit or smoke test first.")
    return last_results


@router.get('/status')
def status():
    return {"status": "ok"}
