"""
Prompt construction for the scoring and guidance oracles.

Optional profile fields are always rendered, as NOT_PROVIDED when absent,
so the model never has to guess whether a field was left out.
"""
from typing import List, Optional, Sequence
from scholarmatch.models import StudentProfile, Scholarship

NOT_PROVIDED = "Not provided"
NOT_SPECIFIED = "Not specified"
ANY = "Any"

MATCH_SYSTEM_PROMPT = (
    "You are an expert scholarship counselor who helps students find the best funding "
    "opportunities. Provide accurate, helpful match scores and detailed reasoning."
)

GUIDANCE_SYSTEM_PROMPT = (
    "You are a professional scholarship advisor who provides detailed, actionable guidance "
    "to help students succeed in their applications."
)


def _or(value: Optional[str], placeholder: str = NOT_PROVIDED) -> str:
    if value is None or not str(value).strip():
        return placeholder
    return str(value)


def _enum_value(value) -> str:
    return getattr(value, "value", value)


def _join(values: Optional[Sequence[str]], placeholder: str = ANY) -> str:
    if not values:
        return placeholder
    return ", ".join(values)


def format_profile(profile: StudentProfile) -> str:
    lines = [
        f"- Education Level: {profile.education_level}",
        f"- Field of Study: {profile.field_of_study}",
        f"- GPA: {_or(profile.gpa)}",
        f"- Graduation Year: {profile.graduation_year}",
        f"- Skills: {_or(profile.skills)}",
        f"- Activities: {_or(profile.activities)}",
        f"- Financial Need: {_enum_value(profile.financial_need)}",
        f"- Location Preference: {_enum_value(profile.location)}",
    ]
    return "\n".join(lines)


def format_scholarship(scholarship: Scholarship) -> str:
    lines = [
        f"ID: {scholarship.id}",
        f"Title: {scholarship.title}",
        f"Type: {_enum_value(scholarship.type)}",
        f"Requirements: {scholarship.requirements}",
        f"Eligible Fields: {_join(scholarship.eligible_fields)}",
        f"Eligible Levels: {_join(scholarship.eligible_levels)}",
        f"Min GPA: {_or(scholarship.eligibility_gpa, NOT_SPECIFIED)}",
        f"Tags: {_join(scholarship.tags, placeholder='None')}",
    ]
    return "\n".join(lines)


def build_match_prompt(profile: StudentProfile, catalog: List[Scholarship]) -> str:
    scholarships = "\n\n".join(format_scholarship(s) for s in catalog)
    return f"""Analyze the following student profile and provide match scores (0-100) for each scholarship opportunity.
Consider factors like academic requirements, field of study alignment, financial need, extracurricular activities, and eligibility criteria.

Student Profile:
{format_profile(profile)}

Scholarships to evaluate:
{scholarships}

Return one entry per scholarship in the "matches" array with:
- scholarshipId: the scholarship ID exactly as given above
- matchScore: an integer from 0 to 100
- reasoning: a detailed explanation of why this is or is not a good match"""


def build_guidance_prompt(profile: StudentProfile, scholarship: Scholarship) -> str:
    return f"""Generate personalized application guidance for this student and scholarship opportunity.

Student Profile:
- Name: {profile.name}
- Education Level: {profile.education_level}
- Field of Study: {profile.field_of_study}
- GPA: {_or(profile.gpa)}
- Skills: {_or(profile.skills)}
- Activities: {_or(profile.activities)}
- Financial Need: {_enum_value(profile.financial_need)}

Scholarship Details:
- Title: {scholarship.title}
- Organization: {scholarship.organization}
- Type: {_enum_value(scholarship.type)}
- Amount: {scholarship.amount}
- Requirements: {scholarship.requirements}
- Description: {scholarship.description}

Provide:
- essayTips: detailed essay writing tips specific to this scholarship
- checklist: the specific requirements and documents to prepare, one item per entry
- improvementSuggestions: suggestions for strengthening the student's profile for this opportunity"""
