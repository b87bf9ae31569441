from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from interview_prep.api.dependencies import get_progress_service
from interview_prep.core.auth import CurrentUserId
from interview_prep.core.rate_limit import rate_limit
from interview_prep.schemas.responses import SkillProgressEnvelope, TodayStats
from interview_prep.services.progress_service import ProgressService

router = APIRouter(tags=["Progress"], dependencies=[Depends(rate_limit("read"))])

ProgressServiceDep = Annotated[ProgressService, Depends(get_progress_service)]


@router.get("/progress/today", response_model=TodayStats)
def today_stats(user_id: CurrentUserId, service: ProgressServiceDep) -> TodayStats:
    """Questions attempted, minutes spent and average score since UTC midnight."""
    return service.today_stats(user_id)


@router.get("/progress/skills", response_model=SkillProgressEnvelope)
def skill_progress(user_id: CurrentUserId, service: ProgressServiceDep) -> SkillProgressEnvelope:
    return SkillProgressEnvelope(skills=service.skill_progress(user_id))
