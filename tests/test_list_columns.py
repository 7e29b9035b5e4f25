"""
Tests for the JSON list columns on scholarships and guidance
"""
from scholarmatch.models import ApplicationGuidance, Scholarship, ScholarshipType


class TestListColumns:

    def test_tags_keep_their_order(self, db, make_scholarship):
        tags = ["zeta", "alpha", "mu", "alpha-2"]
        scholarship = make_scholarship(tags=tags)
        db.expire_all()

        loaded = db.query(Scholarship).filter(Scholarship.id == scholarship.id).one()
        assert loaded.tags == tags

    def test_unicode_and_commas_survive(self, db, make_scholarship):
        tags = ["₹ finance", "arts, culture", "naïve"]
        scholarship = make_scholarship(tags=tags)
        db.expire_all()

        loaded = db.query(Scholarship).filter(Scholarship.id == scholarship.id).one()
        assert loaded.tags == tags

    def test_empty_and_unset_eligibility(self, db, make_scholarship):
        scholarship = make_scholarship(eligible_fields=[], eligible_levels=None)
        db.expire_all()

        loaded = db.query(Scholarship).filter(Scholarship.id == scholarship.id).one()
        assert loaded.eligible_fields == []
        assert loaded.eligible_levels is None

    def test_tags_default_to_empty_list(self, db):
        scholarship = Scholarship(
            title="No Tags Award",
            organization="Org",
            amount="$500",
            deadline="2030-01-01",
            description="d",
            requirements="r",
            type=ScholarshipType.MERIT_BASED,
        )
        db.add(scholarship)
        db.commit()
        db.expire_all()

        loaded = db.query(Scholarship).filter(Scholarship.id == scholarship.id).one()
        assert loaded.tags == []

    def test_checklist_keeps_its_order(self, db, make_profile, make_scholarship):
        profile, scholarship = make_profile(), make_scholarship()
        checklist = ["Transcript", "Essay: why STEM, why now", "Two references"]
        guidance = ApplicationGuidance(
            profile_id=profile.id,
            scholarship_id=scholarship.id,
            essay_tips="tips",
            checklist=checklist,
            improvement_suggestions="more",
        )
        db.add(guidance)
        db.commit()
        db.expire_all()

        loaded = db.query(ApplicationGuidance).filter(ApplicationGuidance.id == guidance.id).one()
        assert loaded.checklist == checklist
