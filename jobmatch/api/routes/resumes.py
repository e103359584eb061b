"""Saved resume endpoints."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobmatch.api.schemas import DeleteResponse, ResumeCreate, ResumeUpdate
from jobmatch.db import SavedResumeRecord, get_db
from jobmatch.errors import NotFoundError
from jobmatch.models import SavedResume, utcnow

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_record(db: Session, resume_id: str) -> SavedResumeRecord:
    record = db.query(SavedResumeRecord).filter(SavedResumeRecord.id == resume_id).first()
    if not record:
        raise NotFoundError(f"Resume with ID {resume_id} not found")
    return record


@router.get("", response_model=list[SavedResume])
def list_resumes(db: Session = Depends(get_db)):
    """List saved resumes, newest first."""
    records = db.query(SavedResumeRecord).order_by(SavedResumeRecord.saved_at.desc()).all()
    return [r.to_model() for r in records]


@router.post("", response_model=SavedResume, status_code=201)
def create_resume(data: ResumeCreate, db: Session = Depends(get_db)):
    """Save a new resume version."""
    record = SavedResumeRecord(
        name=data.name,
        content=data.content,
        job_description=data.job_description,
        saved_at=utcnow(),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Saved resume %s (%s)", record.id, record.name)
    return record.to_model()


@router.put("/{resume_id}", response_model=SavedResume)
def update_resume(resume_id: str, data: ResumeUpdate, db: Session = Depends(get_db)):
    """Update fields of a saved resume."""
    record = _get_record(db, resume_id)

    if data.name is not None:
        record.name = data.name
    if data.content is not None:
        record.content = data.content
    if data.job_description is not None:
        record.job_description = data.job_description

    db.commit()
    db.refresh(record)
    return record.to_model()


@router.delete("/{resume_id}", response_model=DeleteResponse)
def delete_resume(resume_id: str, db: Session = Depends(get_db)):
    """Delete a saved resume by ID."""
    record = _get_record(db, resume_id)
    db.delete(record)
    db.commit()
    logger.info("Deleted resume %s", resume_id)
    return DeleteResponse(success=True)
