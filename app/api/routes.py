from fastapi import APIRouter, HTTPException, status
from app.schemas import LookupResponse, RequestEnvelope, ResponseEnvelope
from app.services import lookup as lookup_service
from app.skill import handlers

router = APIRouter()

@router.post("/skill", response_model=ResponseEnvelope, response_model_exclude_none=True)
async def skill_webhook(envelope: RequestEnvelope):
    """
    Voice platform webhook.

    Routes the request to the matching skill handler and returns the speech
    response envelope. Handler failures are turned into an apology response,
    so this endpoint answers 200 for any well-formed envelope.
    """
    return await handlers.dispatch(envelope)

@router.get("/lookup/{topic:path}", response_model=LookupResponse)
async def lookup_topic(topic: str):
    """Debug endpoint returning the first paragraph extracted for a topic"""
    if not topic.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Topic is required"
        )

    outcome = await lookup_service.lookup_topic(topic)
    return LookupResponse(
        topic=outcome.topic,
        ok=outcome.ok,
        text=outcome.text,
        error=None if outcome.ok else f"{type(outcome.error).__name__}: {outcome.error}",
    )

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Wiki Topic Summarizer"}
