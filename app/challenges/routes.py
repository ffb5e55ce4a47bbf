from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.challenges.db import get_active_challenges
from app.challenges.schemas import ChallengeBase, ChallengeCompleteRequest, DailyChallengeResponse, MessageResponse
from app.challenges.service import complete_challenge, get_daily_challenge
from app.core.database import get_db

router = APIRouter(prefix="/api/daily-challenge", tags=["Daily Challenge"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=List[ChallengeBase],
    summary="List active challenges",
    responses={
        200: {"description": "Active challenges retrieved."},
        500: {"description": "Failed to fetch challenges."},
    },
)
def list_challenges_route(db: Session = Depends(get_db)) -> List[ChallengeBase]:
    try:
        return get_active_challenges(db)
    except Exception as e:
        logger.error(f"Error fetching challenges: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch challenges")


@router.post(
    "/complete",
    response_model=MessageResponse,
    summary="Mark a challenge as completed",
    description="Record that a user completed a challenge today. Completing it twice on one day is a no-op.",
    responses={
        200: {"description": "Challenge completed, or already completed today."},
        400: {"description": "Missing challengeId or userId."},
        404: {"description": "Challenge not found."},
        500: {"description": "Failed to complete challenge."},
    },
)
def complete_challenge_route(
    request: ChallengeCompleteRequest,
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        return MessageResponse(message=complete_challenge(db, request))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error completing challenge: {e}")
        raise HTTPException(status_code=500, detail="Failed to complete challenge")


@router.get(
    "/{user_id}",
    response_model=DailyChallengeResponse,
    summary="Get today's challenge for a user",
    description="""
                Returns the challenge the user completed today, or a random active challenge
                they have not completed in the last 7 days.
                """,
    responses={
        200: {"description": "Daily challenge retrieved."},
        404: {"description": "No challenges available."},
        500: {"description": "Failed to fetch daily challenge."},
    },
)
def daily_challenge_route(
    user_id: str,
    db: Session = Depends(get_db),
) -> DailyChallengeResponse:
    try:
        daily = get_daily_challenge(db, user_id)
        return DailyChallengeResponse(
            challenge=ChallengeBase.model_validate(daily["challenge"]), completed=daily["completed"]
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching daily challenge for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch daily challenge")
