import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from repairdesk.db.session import get_db

log = logging.getLogger(__name__)

router = APIRouter(prefix="/health")

@router.get("")
def health():
    return {"status": "ok"}

@router.get("/db")
def health_db(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        log.error("Database health check failed: %s", e)
        return JSONResponse(status_code=500, content={"error": "database unavailable"})
    return {"status": "ok"}
