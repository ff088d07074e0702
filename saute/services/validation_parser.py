from pydantic import BaseModel, Field
from typing import Optional
from saute.services.prompt_builder import APPROVED_TOKEN, NEEDS_IMPROVEMENT_TOKEN

APPROVED_CONFIDENCE = 0.85
NEEDS_IMPROVEMENT_CONFIDENCE = 0.75
FALLBACK_MIN_CONFIDENCE = 0.6
KEYWORD_WEIGHT = 0.1

APPROVAL_KEYWORDS = ('excellent', 'perfect', 'correct', 'good technique', 'well done')
IMPROVEMENT_KEYWORDS = ('improve', 'incorrect', 'wrong', 'adjust', 'fix', 'better')

class Verdict(BaseModel):
    approved: bool
    confidence: float = Field(ge=0.0, le=1.0)

class ParsedFeedback(BaseModel):
    feedback: str
    verdict: Optional[Verdict] = None

def count_keywords(text: str, keywords) -> int:
    """Number of distinct keywords present in the text, case-insensitive"""
    lowered = text.lower()
    return sum(1 for word in keywords if word in lowered)

def parse_validation_result(text: Optional[str], require_validation: bool) -> ParsedFeedback:
    """
    Turn one model reply into feedback plus a verdict.
    Replies that ignore the APPROVED:/NEEDS_IMPROVEMENT: protocol are scored by keywords.
    """
    text = text or ""

    if not require_validation:
        return ParsedFeedback(feedback=text)

    if not text:
        return ParsedFeedback(feedback=text, verdict=Verdict(approved=False, confidence=0.0))

    if text.startswith(APPROVED_TOKEN):
        return ParsedFeedback(
            feedback=text[len(APPROVED_TOKEN):].strip(),
            verdict=Verdict(approved=True, confidence=APPROVED_CONFIDENCE)
        )

    if text.startswith(NEEDS_IMPROVEMENT_TOKEN):
        return ParsedFeedback(
            feedback=text[len(NEEDS_IMPROVEMENT_TOKEN):].strip(),
            verdict=Verdict(approved=False, confidence=NEEDS_IMPROVEMENT_CONFIDENCE)
        )

    approval_count = count_keywords(text, APPROVAL_KEYWORDS)
    improvement_count = count_keywords(text, IMPROVEMENT_KEYWORDS)
    # ties are not approvals
    approved = approval_count > improvement_count
    confidence = min(1.0, max(FALLBACK_MIN_CONFIDENCE, (approval_count + improvement_count) * KEYWORD_WEIGHT))

    return ParsedFeedback(feedback=text, verdict=Verdict(approved=approved, confidence=confidence))
