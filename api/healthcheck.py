from fastapi import APIRouter
import ortools

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck():
    return {"status": "ok", "ortools": ortools.__version__}
