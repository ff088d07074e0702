import pytest

from saute.catalog.skills import Skill
from saute.services.prompt_builder import (
    SKILL_PROMPTS,
    build_analysis_prompt,
    generic_prompt,
)


def test_every_skill_has_its_own_template() -> None:
    assert set(SKILL_PROMPTS) == set(Skill)
    assert len(set(SKILL_PROMPTS.values())) == len(Skill)


@pytest.mark.parametrize("skill", list(Skill))
def test_known_skill_uses_specific_template(skill: Skill) -> None:
    prompt = build_analysis_prompt(skill.value, context="ignored context")
    assert prompt
    assert prompt == SKILL_PROMPTS[skill]
    assert prompt != generic_prompt("ignored context")
    assert "ignored context" not in prompt


def test_unknown_skill_falls_back_to_generic_with_context() -> None:
    context = "Currently learning: Flambé. Tilt the pan away from you."
    prompt = build_analysis_prompt("flambe", context=context)
    assert prompt == generic_prompt(context)
    assert context in prompt


def test_skill_enum_and_tag_build_the_same_prompt() -> None:
    assert build_analysis_prompt(Skill.seasoning) == build_analysis_prompt("seasoning")


def test_no_validation_block_unless_required() -> None:
    prompt = build_analysis_prompt("knife-basics", step_title="Proper Grip")
    assert "APPROVED:" not in prompt
    assert "VALIDATION MODE" not in prompt


def test_validation_block_names_step_tokens_and_attempt() -> None:
    prompt = build_analysis_prompt(
        "knife-basics",
        step_title="Proper Grip",
        require_validation=True,
        attempts=3,
    )
    assert prompt.startswith(SKILL_PROMPTS[Skill.knife_basics])
    assert 'correct for "Proper Grip"' in prompt
    assert '"APPROVED:"' in prompt
    assert '"NEEDS_IMPROVEMENT:"' in prompt
    assert "Be encouraging but honest." in prompt
    assert "This is attempt 3." in prompt


@pytest.mark.parametrize("attempts", [None, 0])
def test_missing_attempt_count_reads_as_first_attempt(attempts) -> None:
    prompt = build_analysis_prompt("seasoning", require_validation=True, attempts=attempts)
    assert "This is attempt 1." in prompt
