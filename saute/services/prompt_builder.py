from typing import Dict, Optional
from saute.catalog.skills import Skill

SKILL_PROMPTS: Dict[Skill, str] = {
    Skill.knife_basics: """Analyze this cooking image focusing on knife handling technique. Look for:
        - Proper knife grip (pinch grip with thumb and forefinger on blade)
        - Hand positioning and finger placement (claw technique)
        - Cutting board stability and knife angle
        - Safety practices and posture
        Provide specific, encouraging feedback with actionable improvements.""",

    Skill.heat_control: """Analyze this cooking image focusing on heat control and temperature management. Look for:
        - Pan preheating indicators (oil shimmer, steam)
        - Food browning and cooking progress
        - Flame/heat level appropriateness
        - Oil temperature and smoking
        Provide specific feedback on temperature adjustments needed.""",

    Skill.seasoning: """Analyze this cooking image focusing on seasoning and flavor building. Look for:
        - Timing of seasoning application
        - Distribution and technique
        - Ingredient preparation and mise en place
        - Color and visual cues of proper seasoning
        Provide specific feedback on seasoning technique and timing.""",

    Skill.mise_en_place: """Analyze this cooking image focusing on kitchen organization and preparation. Look for:
        - Ingredient preparation and organization
        - Workspace cleanliness and efficiency
        - Tool placement and accessibility
        - Overall kitchen setup and workflow
        Provide specific feedback on organization and preparation technique.""",

    Skill.pan_basics: """Analyze this cooking image focusing on pan technique and selection. Look for:
        - Appropriate pan size for the amount of food
        - Pan preheating and oil readiness
        - Food spacing and overcrowding
        - Pan type suitability for the cooking method
        Provide specific feedback on pan technique and usage.""",

    Skill.pasta_fundamentals: """Analyze this cooking image focusing on pasta preparation. Look for:
        - Water-to-pasta ratio and pot size
        - Water boiling state and pasta movement
        - Pasta shape and sauce pairing
        - Cooking timing and doneness testing
        Provide specific feedback on pasta cooking technique.""",

    Skill.egg_techniques: """Analyze this cooking image focusing on egg preparation. Look for:
        - Heat level appropriateness for egg cooking method
        - Egg freshness indicators and handling
        - Timing and doneness for different egg preparations
        - Pan preparation and oil/butter usage
        Provide specific feedback on egg cooking technique.""",

    Skill.vegetable_prep: """Analyze this cooking image focusing on vegetable preparation. Look for:
        - Proper washing and cleaning technique
        - Knife cuts consistency and appropriateness
        - Vegetable handling and storage
        - Blanching or cooking technique if applicable
        Provide specific feedback on vegetable preparation.""",

    Skill.sauce_basics: """Analyze this cooking image focusing on sauce making technique. Look for:
        - Roux preparation and consistency
        - Emulsification technique and stability
        - Reduction progress and consistency
        - Seasoning and flavor balance indicators
        Provide specific feedback on sauce making technique.""",

    Skill.meat_handling: """Analyze this cooking image focusing on meat handling and preparation. Look for:
        - Food safety practices and cleanliness
        - Proper seasoning timing and technique
        - Meat preparation and cutting technique
        - Cooking method appropriateness for the cut
        Provide specific feedback on meat handling and preparation."""
}

APPROVED_TOKEN = "APPROVED:"
NEEDS_IMPROVEMENT_TOKEN = "NEEDS_IMPROVEMENT:"

def generic_prompt(context: str) -> str:
    return f"""Analyze this cooking technique image. Context: {context}.
       Provide specific feedback on technique, safety, and improvements."""

def validation_protocol(step_title: str, attempts: Optional[int]) -> str:
    return f"""

VALIDATION MODE: You must evaluate if the technique shown is correct for "{step_title}".

IMPORTANT: Your response must start with either "{APPROVED_TOKEN}" or "{NEEDS_IMPROVEMENT_TOKEN}" followed by your feedback.

- Use "{APPROVED_TOKEN}" if the technique is correct, safe, and properly executed (confidence 80%+)
- Use "{NEEDS_IMPROVEMENT_TOKEN}" if there are significant issues that need correction

Be encouraging but honest. This is attempt {attempts or 1}."""

def build_analysis_prompt(
    skill,
    context: str = "",
    step_title: str = "",
    require_validation: bool = False,
    attempts: Optional[int] = None
) -> str:
    """Compose the analysis prompt for a skill, with the validation protocol when required"""
    resolved = Skill.from_tag(skill)
    prompt = SKILL_PROMPTS[resolved] if resolved is not None else generic_prompt(context)

    if require_validation:
        prompt += validation_protocol(step_title, attempts)

    return prompt
