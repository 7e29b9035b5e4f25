"""
Bundled scholarship catalog and the bulk reseed that loads it.
"""
from typing import Dict, List
import logging

from sqlalchemy.orm import Session

from scholarmatch.models import ApplicationGuidance, Scholarship, ScholarshipMatch, ScholarshipType

logger = logging.getLogger(__name__)

UNDERGRAD_ALL = ["undergraduate-freshman", "undergraduate-sophomore", "undergraduate-junior", "undergraduate-senior"]
UNDERGRAD_UPPER = ["undergraduate-sophomore", "undergraduate-junior", "undergraduate-senior"]

SEED_SCHOLARSHIPS: List[Dict] = [
    # Technology
    {
        "title": "Google Computer Science Scholarship",
        "organization": "Google Inc.",
        "amount": "$10,000",
        "deadline": "2025-03-15",
        "description": "Supporting underrepresented students in computer science and technology fields.",
        "requirements": "3.5+ GPA, demonstrated leadership, passion for computer science",
        "tags": ["technology", "computer-science", "diversity", "leadership"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.5",
        "eligible_fields": ["Computer Science", "Software Engineering", "Information Technology"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    {
        "title": "Microsoft LEAP Engineering Scholarship",
        "organization": "Microsoft Corporation",
        "amount": "$25,000",
        "deadline": "2025-04-01",
        "description": "Full-time internship program for students from non-traditional backgrounds in tech.",
        "requirements": "Enrolled in computer science or related field, strong coding skills",
        "tags": ["technology", "internship", "coding", "diversity"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.0",
        "eligible_fields": ["Computer Science", "Software Engineering", "Electrical Engineering"],
        "eligible_levels": ["undergraduate-sophomore", "undergraduate-junior"],
    },
    {
        "title": "Apple WWDC Student Scholarship",
        "organization": "Apple Inc.",
        "amount": "$5,000",
        "deadline": "2025-05-20",
        "description": "Supporting innovative student developers building apps for Apple platforms.",
        "requirements": "App development portfolio, Swift programming skills",
        "tags": ["technology", "mobile-development", "innovation", "apple"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.0",
        "eligible_fields": ["Computer Science", "Software Engineering", "Mobile Development"],
        "eligible_levels": UNDERGRAD_ALL,
    },
    # Engineering
    {
        "title": "Society of Women Engineers Scholarship",
        "organization": "Society of Women Engineers",
        "amount": "$15,000",
        "deadline": "2025-02-15",
        "description": "Empowering women in engineering and technology fields.",
        "requirements": "Female student, 3.5+ GPA, engineering major",
        "tags": ["engineering", "women", "stem", "leadership"],
        "type": ScholarshipType.DIVERSITY,
        "eligibility_gpa": "3.5",
        "eligible_fields": ["Mechanical Engineering", "Electrical Engineering", "Civil Engineering", "Chemical Engineering"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    {
        "title": "IEEE Foundation Scholarship",
        "organization": "Institute of Electrical and Electronics Engineers",
        "amount": "$8,000",
        "deadline": "2025-03-30",
        "description": "Supporting students pursuing electrical engineering and computer science.",
        "requirements": "IEEE student membership, strong academic performance",
        "tags": ["engineering", "electrical", "ieee", "technology"],
        "type": ScholarshipType.FIELD_SPECIFIC,
        "eligibility_gpa": "3.2",
        "eligible_fields": ["Electrical Engineering", "Computer Engineering", "Computer Science"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    # Business & finance
    {
        "title": "JP Morgan Chase Scholarship",
        "organization": "JP Morgan Chase & Co.",
        "amount": "₹16,50,000",
        "deadline": "2025-04-15",
        "description": "Supporting students pursuing careers in finance and business technology.",
        "requirements": "Business or finance major, 3.3+ GPA, leadership experience",
        "tags": ["finance", "business", "leadership", "banking"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.3",
        "eligible_fields": ["Business Administration", "Finance", "Economics", "Accounting"],
        "eligible_levels": ["undergraduate-junior", "undergraduate-senior"],
    },
    {
        "title": "Goldman Sachs Scholarship Program",
        "organization": "Goldman Sachs Group",
        "amount": "₹24,75,000",
        "deadline": "2025-03-01",
        "description": "Comprehensive scholarship program for future finance leaders.",
        "requirements": "Finance or economics major, exceptional academic record, internship experience",
        "tags": ["finance", "investment", "leadership", "economics"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.7",
        "eligible_fields": ["Finance", "Economics", "Business Administration"],
        "eligible_levels": ["undergraduate-senior", "graduate-masters"],
    },
    # Healthcare
    {
        "title": "American Medical Association Scholarship",
        "organization": "American Medical Association",
        "amount": "$35,000",
        "deadline": "2025-05-01",
        "description": "Supporting future healthcare professionals and medical researchers.",
        "requirements": "Pre-med or medical student, 3.8+ GPA, healthcare volunteer experience",
        "tags": ["medical", "healthcare", "research", "volunteer"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.8",
        "eligible_fields": ["Pre-Medicine", "Biology", "Chemistry", "Health Sciences"],
        "eligible_levels": ["undergraduate-junior", "undergraduate-senior", "graduate-masters"],
    },
    {
        "title": "Johnson & Johnson Nursing Scholarship",
        "organization": "Johnson & Johnson",
        "amount": "$12,000",
        "deadline": "2025-06-15",
        "description": "Supporting the next generation of nursing professionals.",
        "requirements": "Nursing major, 3.5+ GPA, clinical experience",
        "tags": ["nursing", "healthcare", "clinical", "patient-care"],
        "type": ScholarshipType.FIELD_SPECIFIC,
        "eligibility_gpa": "3.5",
        "eligible_fields": ["Nursing", "Health Sciences"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    # Environment & science
    {
        "title": "Environmental Protection Agency Scholarship",
        "organization": "US Environmental Protection Agency",
        "amount": "$18,000",
        "deadline": "2025-04-30",
        "description": "Supporting students committed to environmental protection and sustainability.",
        "requirements": "Environmental science major, 3.4+ GPA, environmental project experience",
        "tags": ["environmental", "sustainability", "science", "climate"],
        "type": ScholarshipType.FIELD_SPECIFIC,
        "eligibility_gpa": "3.4",
        "eligible_fields": ["Environmental Science", "Environmental Engineering", "Biology", "Chemistry"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    {
        "title": "National Science Foundation STEM Scholarship",
        "organization": "National Science Foundation",
        "amount": "$22,000",
        "deadline": "2025-02-28",
        "description": "Advancing STEM education and research across all scientific disciplines.",
        "requirements": "STEM major, 3.6+ GPA, research experience",
        "tags": ["stem", "research", "science", "mathematics"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.6",
        "eligible_fields": ["Physics", "Chemistry", "Biology", "Mathematics", "Computer Science"],
        "eligible_levels": ["undergraduate-junior", "undergraduate-senior", "graduate-masters"],
    },
    # Humanities
    {
        "title": "Fulbright International Exchange Scholarship",
        "organization": "US Department of State",
        "amount": "$40,000",
        "deadline": "2025-10-15",
        "description": "International educational exchange program promoting cultural understanding.",
        "requirements": "Bachelor's degree, strong academic record, language skills",
        "tags": ["international", "cultural-exchange", "languages", "research"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.5",
        "eligible_fields": ["International Relations", "Languages", "Cultural Studies", "Political Science"],
        "eligible_levels": ["graduate-masters", "graduate-phd"],
    },
    {
        "title": "Humanities Research Council Grant",
        "organization": "National Humanities Research Council",
        "amount": "$15,000",
        "deadline": "2025-03-20",
        "description": "Supporting innovative research in humanities and social sciences.",
        "requirements": "Humanities major, research proposal, faculty recommendation",
        "tags": ["humanities", "research", "social-sciences", "culture"],
        "type": ScholarshipType.FIELD_SPECIFIC,
        "eligibility_gpa": "3.4",
        "eligible_fields": ["History", "Philosophy", "Literature", "Art History", "Anthropology"],
        "eligible_levels": ["undergraduate-senior", "graduate-masters"],
    },
    # Need-based
    {
        "title": "First Generation College Student Scholarship",
        "organization": "Educational Foundation",
        "amount": "$8,000",
        "deadline": "2025-07-01",
        "description": "Supporting first-generation college students pursuing higher education.",
        "requirements": "First-generation college student, demonstrated financial need",
        "tags": ["first-generation", "financial-need", "education", "support"],
        "type": ScholarshipType.NEED_BASED,
        "eligibility_gpa": "2.8",
        "eligible_fields": [],
        "eligible_levels": UNDERGRAD_ALL,
    },
    {
        "title": "Minority Student Success Fund",
        "organization": "Diversity Education Alliance",
        "amount": "$12,000",
        "deadline": "2025-08-15",
        "description": "Promoting educational equity for underrepresented minority students.",
        "requirements": "Underrepresented minority status, financial need, 3.0+ GPA",
        "tags": ["diversity", "minority", "equity", "financial-aid"],
        "type": ScholarshipType.DIVERSITY,
        "eligibility_gpa": "3.0",
        "eligible_fields": [],
        "eligible_levels": UNDERGRAD_ALL,
    },
    # Internships
    {
        "title": "NASA Summer Internship Program",
        "organization": "National Aeronautics and Space Administration",
        "amount": "$7,500",
        "deadline": "2025-01-31",
        "description": "Hands-on internship experience in aerospace engineering and space science.",
        "requirements": "STEM major, 3.0+ GPA, US citizenship",
        "tags": ["internship", "aerospace", "engineering", "space"],
        "type": ScholarshipType.INTERNSHIP,
        "eligibility_gpa": "3.0",
        "eligible_fields": ["Aerospace Engineering", "Mechanical Engineering", "Physics", "Computer Science"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    {
        "title": "Meta Software Engineering Internship",
        "organization": "Meta Platforms Inc.",
        "amount": "$12,000",
        "deadline": "2025-02-10",
        "description": "Full-time summer internship building next-generation social technology.",
        "requirements": "Computer science major, strong programming skills, previous internship experience",
        "tags": ["internship", "software", "social-media", "technology"],
        "type": ScholarshipType.INTERNSHIP,
        "eligibility_gpa": "3.2",
        "eligible_fields": ["Computer Science", "Software Engineering"],
        "eligible_levels": ["undergraduate-junior", "undergraduate-senior"],
    },
    {
        "title": "Tesla Engineering Co-op Program",
        "organization": "Tesla Inc.",
        "amount": "$15,000",
        "deadline": "2025-03-05",
        "description": "Six-month co-op program working on sustainable transportation and energy.",
        "requirements": "Engineering major, 3.3+ GPA, passion for sustainability",
        "tags": ["internship", "automotive", "sustainability", "engineering"],
        "type": ScholarshipType.INTERNSHIP,
        "eligibility_gpa": "3.3",
        "eligible_fields": ["Mechanical Engineering", "Electrical Engineering", "Chemical Engineering"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    {
        "title": "Netflix Content Strategy Internship",
        "organization": "Netflix Inc.",
        "amount": "$8,000",
        "deadline": "2025-04-20",
        "description": "Summer internship in content analysis and entertainment industry strategy.",
        "requirements": "Business, communications, or media studies major, analytical skills",
        "tags": ["internship", "media", "entertainment", "strategy"],
        "type": ScholarshipType.INTERNSHIP,
        "eligibility_gpa": "3.1",
        "eligible_fields": ["Business Administration", "Communications", "Media Studies", "Marketing"],
        "eligible_levels": ["undergraduate-junior", "undergraduate-senior"],
    },
    # General
    {
        "title": "Adobe Creative Scholarship",
        "organization": "Adobe Inc.",
        "amount": "$7,500",
        "deadline": "2025-04-25",
        "description": "Supporting creative students in digital arts and design.",
        "requirements": "Portfolio submission, creative arts major, 3.0+ GPA",
        "tags": ["creative", "design", "digital-arts", "portfolio"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.0",
        "eligible_fields": ["Graphic Design", "Digital Arts", "Media Arts", "Computer Science"],
        "eligible_levels": UNDERGRAD_ALL,
    },
    {
        "title": "Salesforce Trailblazer Scholarship",
        "organization": "Salesforce Foundation",
        "amount": "$10,000",
        "deadline": "2025-05-10",
        "description": "Empowering the next generation of business technology leaders.",
        "requirements": "Business or technology major, leadership experience, 3.2+ GPA",
        "tags": ["business", "technology", "leadership", "salesforce"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.2",
        "eligible_fields": ["Business Administration", "Information Systems", "Computer Science", "Marketing"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
    {
        "title": "General Academic Excellence Award",
        "organization": "Education Foundation",
        "amount": "$5,000",
        "deadline": "2025-06-01",
        "description": "Recognizing outstanding academic achievement across all fields.",
        "requirements": "3.5+ GPA, any major, demonstrated academic excellence",
        "tags": ["academic", "excellence", "general", "achievement"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.5",
        "eligible_fields": [],
        "eligible_levels": UNDERGRAD_ALL,
    },
    {
        "title": "International Student Success Fund",
        "organization": "Global Education Alliance",
        "amount": "$8,000",
        "deadline": "2025-07-15",
        "description": "Supporting international students pursuing higher education.",
        "requirements": "International student status, any major, 3.0+ GPA",
        "tags": ["international", "diversity", "global", "education"],
        "type": ScholarshipType.NEED_BASED,
        "eligibility_gpa": "3.0",
        "eligible_fields": [],
        "eligible_levels": UNDERGRAD_ALL,
    },
    {
        "title": "STEM Innovation Challenge",
        "organization": "Innovation Institute",
        "amount": "$12,000",
        "deadline": "2025-03-25",
        "description": "Funding innovative STEM projects and research.",
        "requirements": "STEM major, research project proposal, 3.3+ GPA",
        "tags": ["stem", "innovation", "research", "project"],
        "type": ScholarshipType.MERIT_BASED,
        "eligibility_gpa": "3.3",
        "eligible_fields": ["Engineering", "Computer Science", "Mathematics", "Physics", "Chemistry", "Biology"],
        "eligible_levels": UNDERGRAD_UPPER,
    },
]


def reseed_catalog(db: Session) -> int:
    """
    Replace the catalog with SEED_SCHOLARSHIPS.
    Matches and guidance reference scholarships, so they are cleared first.
    """
    try:
        db.query(ScholarshipMatch).delete(synchronize_session=False)
        db.query(ApplicationGuidance).delete(synchronize_session=False)
        db.query(Scholarship).delete(synchronize_session=False)
        for data in SEED_SCHOLARSHIPS:
            db.add(Scholarship(**{**data, "tags": list(data["tags"]),
                                  "eligible_fields": list(data["eligible_fields"]),
                                  "eligible_levels": list(data["eligible_levels"])}))
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Seeded {len(SEED_SCHOLARSHIPS)} scholarships")
    return len(SEED_SCHOLARSHIPS)


def seed_if_empty(db: Session) -> int:
    if db.query(Scholarship).count() > 0:
        return 0
    return reseed_catalog(db)
