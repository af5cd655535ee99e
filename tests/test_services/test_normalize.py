"""test_normalize.py
Test conversions between ResumeData and the JSON exchanged with the LLM.
"""
import pytest

from resume_architect.exceptions import ResumeDataError
from resume_architect.ids import SequentialIdGenerator
from resume_architect.services.normalize import (
    build_translation_payload,
    merge_translation,
    resume_from_extraction_payload,
)
from resume_architect.test_helpers.llm_client_test_helpers import expected_test_responses


class TestExtractionPayload:
    """Tests for `resume_from_extraction_payload`."""

    def test_full_payload_mapped(self):
        payload = expected_test_responses["extract_resume"]["success"]
        resume = resume_from_extraction_payload(payload, id_generator=SequentialIdGenerator())

        assert resume.personal_info.full_name == "Jane Smith"
        assert resume.personal_info.website == ""  # null in the response
        assert resume.personal_info.avatar == ""
        assert resume.experience[0].start_date == "2020-01"
        assert resume.education[0].courses == "Probability, Databases"
        assert [skill.name for skill in resume.skills] == ["Python", "SQL", "Kafka"]

    def test_every_item_gets_a_fresh_id(self):
        payload = expected_test_responses["extract_resume"]["success"]
        resume = resume_from_extraction_payload(payload, id_generator=SequentialIdGenerator())

        ids = (
            [e.id for e in resume.experience]
            + [p.id for p in resume.projects]
            + [e.id for e in resume.education]
            + [s.id for s in resume.skills]
        )
        assert ids == ["id-1", "id-2", "id-3", "id-4", "id-5", "id-6"]

    def test_missing_fields_default_to_empty_string(self):
        resume = resume_from_extraction_payload({
            "personalInfo": {"fullName": "Li Lei"},
            "experience": [{"title": "Intern"}],
        })
        assert resume.personal_info.email == ""
        assert resume.summary == ""
        assert resume.experience[0].company == ""
        assert resume.projects == []

    def test_skills_become_items_at_default_level(self):
        resume = resume_from_extraction_payload({"skills": ["React", "Go"]})
        assert [skill.level for skill in resume.skills] == [80, 80]
        assert resume.skills[0].id != resume.skills[1].id

    def test_skill_objects_tolerated(self):
        resume = resume_from_extraction_payload({"skills": [{"name": "Rust"}]})
        assert resume.skills[0].name == "Rust"

    def test_nameless_skills_dropped(self):
        resume = resume_from_extraction_payload(
            {"skills": ["Python", None, {}, "  ", {"name": "Go"}]},
            id_generator=SequentialIdGenerator(),
        )
        assert [(skill.id, skill.name) for skill in resume.skills] == [("id-1", "Python"), ("id-2", "Go")]

    def test_non_list_section_raises(self):
        with pytest.raises(ResumeDataError):
            resume_from_extraction_payload({"experience": "ten years"})

    def test_non_object_payload_raises(self):
        with pytest.raises(ResumeDataError):
            resume_from_extraction_payload(["not", "an", "object"])


class TestTranslationPayload:
    """Tests for `build_translation_payload`."""

    def test_ids_and_avatar_dropped(self, sample_resume):
        payload = build_translation_payload(sample_resume)

        assert "avatar" not in payload["personalInfo"]
        for section in ("experience", "projects", "education"):
            assert all("id" not in item for item in payload[section])
        assert payload["skills"][0] == "React"

    def test_original_untouched(self, sample_resume):
        build_translation_payload(sample_resume)
        assert sample_resume.experience[0].id == "id-1"


class TestMergeTranslation:
    """Tests for `merge_translation`."""

    def test_ids_reattached_by_position(self, sample_resume):
        payload = build_translation_payload(sample_resume)
        payload["experience"][0]["title"] = "高级软件工程师"

        merged = merge_translation(sample_resume, payload, id_generator=SequentialIdGenerator("new-"))

        assert [e.id for e in merged.experience] == ["id-1", "id-2"]
        assert merged.experience[0].title == "高级软件工程师"
        assert [p.id for p in merged.projects] == ["id-3"]
        assert [e.id for e in merged.education] == ["id-4"]

    def test_extra_entries_get_fresh_ids(self, sample_resume):
        payload = build_translation_payload(sample_resume)
        payload["projects"].append({"name": "额外项目"})

        merged = merge_translation(sample_resume, payload, id_generator=SequentialIdGenerator("new-"))

        assert [p.id for p in merged.projects] == ["id-3", "new-1"]

    def test_skill_levels_follow_position(self, sample_resume):
        payload = build_translation_payload(sample_resume)
        payload["skills"] = ["React", "TypeScript", "Node.js", "AWS", "Python", "GraphQL", "Docker", "Kubernetes"]

        merged = merge_translation(sample_resume, payload, id_generator=SequentialIdGenerator("new-"))

        assert merged.skills[0].level == 90
        assert merged.skills[6].level == 60
        assert merged.skills[7].id == "new-1"
        assert merged.skills[7].level == 80

    def test_nameless_skills_dropped_without_shifting_levels(self, sample_resume):
        payload = build_translation_payload(sample_resume)
        payload["skills"] = ["React", None, "Node.js"]

        merged = merge_translation(sample_resume, payload, id_generator=SequentialIdGenerator("new-"))

        assert [(s.id, s.name, s.level) for s in merged.skills] == [
            ("id-5", "React", 90),
            ("id-7", "Node.js", 80),
        ]

    def test_avatar_restored(self, sample_resume):
        from dataclasses import replace

        original = replace(
            sample_resume,
            personal_info=replace(sample_resume.personal_info, avatar="data:image/png;base64,AAAA"),
        )
        merged = merge_translation(original, build_translation_payload(original))
        assert merged.personal_info.avatar == "data:image/png;base64,AAAA"

    def test_age_and_gender_fall_back_to_original(self, sample_resume):
        payload = build_translation_payload(sample_resume)
        payload["personalInfo"]["age"] = ""
        del payload["personalInfo"]["gender"]

        merged = merge_translation(sample_resume, payload)

        assert merged.personal_info.age == "28"
        assert merged.personal_info.gender == "Male"

    def test_non_object_payload_raises(self, sample_resume):
        with pytest.raises(ResumeDataError):
            merge_translation(sample_resume, "Translation unavailable.")
