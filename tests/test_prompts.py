"""
Tests for oracle prompt construction
"""
from scholarmatch.models import FinancialNeed, LocationPreference, Scholarship, ScholarshipType, StudentProfile
from scholarmatch.services.prompts import (
    ANY,
    NOT_PROVIDED,
    NOT_SPECIFIED,
    build_guidance_prompt,
    build_match_prompt,
)


def _profile(**overrides):
    data = dict(
        id="profile-1",
        name="Sam Okafor",
        email="sam@yahoo.com",
        education_level="undergraduate-junior",
        field_of_study="Computer Science",
        gpa=None,
        graduation_year="2026",
        skills=None,
        activities="Robotics club captain for two years",
        financial_need=FinancialNeed.HIGH,
        location=LocationPreference.NO_PREFERENCE,
    )
    data.update(overrides)
    return StudentProfile(**data)


def _scholarship(**overrides):
    data = dict(
        id="sch-1",
        title="Google Computer Science Scholarship",
        organization="Google Inc.",
        amount="$10,000",
        deadline="2025-03-15",
        description="Supporting underrepresented students in computer science.",
        requirements="3.5+ GPA, demonstrated leadership",
        tags=["technology", "diversity"],
        type=ScholarshipType.MERIT_BASED,
        eligibility_gpa="3.5",
        eligible_fields=["Computer Science", "Software Engineering"],
        eligible_levels=["undergraduate-junior"],
    )
    data.update(overrides)
    return Scholarship(**data)


class TestMatchPrompt:

    def test_missing_optional_fields_render_sentinel(self):
        prompt = build_match_prompt(_profile(), [_scholarship()])
        assert f"- GPA: {NOT_PROVIDED}" in prompt
        assert f"- Skills: {NOT_PROVIDED}" in prompt
        assert "- Activities: Robotics club captain for two years" in prompt

    def test_enum_fields_render_values(self):
        prompt = build_match_prompt(_profile(), [_scholarship()])
        assert "- Financial Need: high" in prompt
        assert "- Location Preference: no-preference" in prompt

    def test_every_scholarship_is_listed_with_its_id(self):
        catalog = [_scholarship(id="sch-1"), _scholarship(id="sch-2", title="Nursing Award")]
        prompt = build_match_prompt(_profile(), catalog)
        assert "ID: sch-1" in prompt
        assert "ID: sch-2" in prompt
        assert "Title: Nursing Award" in prompt
        assert "Type: merit-based" in prompt
        assert "Tags: technology, diversity" in prompt

    def test_unset_eligibility_renders_any(self):
        prompt = build_match_prompt(
            _profile(),
            [_scholarship(eligible_fields=[], eligible_levels=None, eligibility_gpa=None)],
        )
        assert f"Eligible Fields: {ANY}" in prompt
        assert f"Eligible Levels: {ANY}" in prompt
        assert f"Min GPA: {NOT_SPECIFIED}" in prompt


class TestGuidancePrompt:

    def test_includes_profile_and_scholarship_details(self):
        prompt = build_guidance_prompt(_profile(gpa="3.9"), _scholarship())
        assert "- Name: Sam Okafor" in prompt
        assert "- GPA: 3.9" in prompt
        assert "- Organization: Google Inc." in prompt
        assert "- Amount: $10,000" in prompt
        assert "essayTips" in prompt
