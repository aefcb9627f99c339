"""
Progress endpoints: progression charts, frequency, records and summaries.

Argument errors raised by the engine surface as HTTP 400 through the
handler registered in :mod:`app.main`.
"""

import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_current_user_id, get_progress_service
from app.schemas.progress import (Achievement, DashboardSummary, FrequencyBucket, PersonalRecord, ProgressDataPoint,
                                  ProgressOverview, StrengthChartPoint, VolumeDataPoint, VolumeTrendPoint,
                                  WorkoutFrequencyStats, )
from app.services.progress_service import ProgressService

router = APIRouter()

AsOf = Annotated[Optional[datetime.date], Query(description="Reference date (defaults to today)")]
PeriodDays = Annotated[Optional[int], Query(description="Look-back window in days")]
ExerciseTypeIds = Annotated[Optional[list[int]], Query(description="Only include these exercise types")]


@router.get("/strength/{exercise_type_id}", summary="Top weight per day for an exercise.",
            response_model=list[ProgressDataPoint], )
def get_strength_progression(exercise_type_id: int, period_days: PeriodDays = None,
                             as_of: AsOf = None,
                             service: ProgressService = Depends(get_progress_service),
                             user_id: int = Depends(get_current_user_id), ):
    return service.get_strength_progression(user_id, exercise_type_id, period_days, as_of)


@router.get("/strength/{exercise_type_id}/chart", summary="Strength chart by weight, volume or maxWeight.",
            response_model=list[StrengthChartPoint], )
def get_strength_chart(exercise_type_id: int, period_days: PeriodDays = None,
                       metric: str = Query("weight", description="weight, volume or maxWeight"),
                       as_of: AsOf = None,
                       service: ProgressService = Depends(get_progress_service),
                       user_id: int = Depends(get_current_user_id), ):
    return service.get_strength_chart(user_id, exercise_type_id, period_days, metric, as_of)


@router.get("/metcon/{metcon_type_id}", summary="Best result per day for a metcon type.",
            response_model=list[ProgressDataPoint], )
def get_metcon_progression(metcon_type_id: int, period_days: PeriodDays = None,
                           as_of: AsOf = None,
                           service: ProgressService = Depends(get_progress_service),
                           user_id: int = Depends(get_current_user_id), ):
    return service.get_metcon_progression(user_id, metcon_type_id, period_days, as_of)


@router.get("/frequency", summary="Workout frequency and streaks.", response_model=WorkoutFrequencyStats, )
def get_workout_frequency(period_days: PeriodDays = None, as_of: AsOf = None,
                          service: ProgressService = Depends(get_progress_service),
                          user_id: int = Depends(get_current_user_id), ):
    return service.get_workout_frequency(user_id, period_days, as_of)


@router.get("/frequency/chart", summary="Session counts grouped by day, week or month.",
            response_model=list[FrequencyBucket], )
def get_frequency_chart(period_days: PeriodDays = None,
                        group_by: str = Query("week", description="day, week or month"),
                        as_of: AsOf = None,
                        service: ProgressService = Depends(get_progress_service),
                        user_id: int = Depends(get_current_user_id), ):
    return service.get_frequency_chart(user_id, period_days, group_by, as_of)


@router.get("/personal-records", summary="Heaviest lift per exercise.", response_model=list[PersonalRecord], )
def get_personal_records(exercise_type_ids: ExerciseTypeIds = None,
                         limit: Optional[int] = Query(None, description="Maximum number of records"),
                         as_of: AsOf = None,
                         service: ProgressService = Depends(get_progress_service),
                         user_id: int = Depends(get_current_user_id), ):
    return service.get_personal_records(user_id, exercise_type_ids, limit, as_of)


@router.get("/volume", summary="Daily training volume.", response_model=list[VolumeDataPoint], )
def get_volume_stats(period_days: PeriodDays = None, as_of: AsOf = None,
                     service: ProgressService = Depends(get_progress_service),
                     user_id: int = Depends(get_current_user_id), ):
    return service.get_volume_stats(user_id, period_days, as_of)


@router.get("/volume/trends", summary="Daily volume with per-exercise breakdown.",
            response_model=list[VolumeTrendPoint], )
def get_volume_trends(period_days: PeriodDays = None, exercise_type_ids: ExerciseTypeIds = None,
                      as_of: AsOf = None,
                      service: ProgressService = Depends(get_progress_service),
                      user_id: int = Depends(get_current_user_id), ):
    return service.get_volume_trends(user_id, period_days, exercise_type_ids, as_of)


@router.get("/dashboard", summary="Dashboard summary.", response_model=DashboardSummary, )
def get_dashboard_summary(as_of: AsOf = None,
                          service: ProgressService = Depends(get_progress_service),
                          user_id: int = Depends(get_current_user_id), ):
    return service.get_dashboard_summary(user_id, as_of)


@router.get("/achievements", summary="Recent personal records.", response_model=list[Achievement], )
def get_recent_achievements(limit: Optional[int] = Query(None, description="Maximum number of achievements"),
                            days: Optional[int] = Query(None, description="How many recent days to include"),
                            as_of: AsOf = None,
                            service: ProgressService = Depends(get_progress_service),
                            user_id: int = Depends(get_current_user_id), ):
    return service.get_recent_achievements(user_id, limit, as_of, days)


@router.get("/overview", summary="All-time training overview.", response_model=ProgressOverview, )
def get_overview(as_of: AsOf = None, service: ProgressService = Depends(get_progress_service),
                 user_id: int = Depends(get_current_user_id), ):
    return service.get_overview(user_id, as_of)
