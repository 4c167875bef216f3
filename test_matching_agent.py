"""
Test MatchingAgent
"""

import pytest

from job_matching import CandidateProfile, Job, MatchingAgent, MatchingConfig, compute_match

# ═══════════════════════════════════════════════════════════════════════════
# TEST DATA
# ═══════════════════════════════════════════════════════════════════════════

FRONTEND_CANDIDATE = {
    "skills": [{"skill_name": "React", "skill_level": "expert"}, {"skill_name": "Node.js"}],
    "years_of_experience": 4,
    "job_preferences": {
        "preferred_job_types": ["Full-time"],
        "preferred_work_modes": ["Remote"],
    },
}

FRONTEND_JOB = {
    "id": "job-1",
    "job_title": "Frontend Engineer",
    "required_skills": ["react", "typescript"],
    "preferred_skills": [],
    "experience_level": "mid",
    "job_type": "Full-time",
    "work_mode": "Remote",
}

SAMPLE_CANDIDATES = [
    {},
    FRONTEND_CANDIDATE,
    {"skills": ["Python", "SQL", "Docker"], "years_of_experience": 10},
    {"skills": [], "years_of_experience": 0, "job_preferences": {"preferred_work_modes": ["On-site"]}},
    {"skills": ["java"], "yearsOfExperience": "2"},
]

SAMPLE_JOBS = [
    {},
    FRONTEND_JOB,
    {"job_title": "Data Analyst", "department": "Analytics, BI", "experience_level": "Senior"},
    {"required_skills": ["python", "sql"], "preferred_skills": ["aws", "Python "], "experience_level": "principal"},
    {"required_skills": ["javascript", "css", "html", "vue"], "job_type": "Contract", "work_mode": "Hybrid"},
]


def _all_pairs():
    for c in SAMPLE_CANDIDATES:
        for j in SAMPLE_JOBS:
            yield c, j


# ═══════════════════════════════════════════════════════════════════════════
# PROPERTIES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("candidate,job", list(_all_pairs()))
def test_match_percentage_is_bounded_integer(candidate, job):
    result = compute_match(candidate, job)
    assert isinstance(result.match_percentage, int)
    assert 0 <= result.match_percentage <= 100


@pytest.mark.parametrize("candidate,job", list(_all_pairs()))
def test_matched_and_missing_partition_vocabulary(candidate, job):
    from job_matching.services.skill_normalizer import job_skill_vocabulary

    result = compute_match(candidate, job)
    matched = set(result.skills_match.matched)
    missing = set(result.skills_match.missing)
    assert matched.isdisjoint(missing)
    assert matched | missing == set(job_skill_vocabulary(Job.from_any(job)))


def test_idempotent():
    first = compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB)
    second = compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB)
    assert first.model_dump_json() == second.model_dump_json()


def test_empty_inputs_degrade_to_neutral():
    result = compute_match({}, {})
    assert result.skills_match.match_rate == 50
    assert result.skills_match.matched == []
    assert result.skills_match.missing == []
    assert result.experience_match.score == 100
    assert result.experience_match.required_level == "entry"
    assert result.preferences_match.score == 50
    # 50*50 + 100*30 + 50*20 = 6500 -> 65
    assert result.match_percentage == 65


# ═══════════════════════════════════════════════════════════════════════════
# SCENARIOS
# ═══════════════════════════════════════════════════════════════════════════

def test_frontend_scenario():
    candidate = {"skills": ["React", "Node.js"]}
    job = {"required_skills": ["react", "typescript"], "preferred_skills": [], "job_title": "Frontend Engineer"}

    result = compute_match(candidate, job)

    assert "react" in result.skills_match.matched
    assert "typescript" in result.skills_match.missing
    assert result.skills_match.match_rate == 50


def test_senior_candidate_for_junior_job():
    result = compute_match({"years_of_experience": 8}, {"experience_level": "junior"})
    assert result.experience_match.score == 100
    assert result.experience_match.is_match is True


def test_senior_candidate_without_declared_level():
    result = compute_match({"years_of_experience": 7}, {})
    assert result.experience_match.score == 100
    assert result.experience_match.is_match is True


def test_no_experience_for_senior_job():
    result = compute_match({"years_of_experience": 0}, {"experience_level": "senior"})
    assert result.experience_match.score == pytest.approx(70 / 3)
    assert result.experience_match.is_match is False


def test_no_preferences_full_time_job():
    result = compute_match({"skills": ["python"]}, {"job_type": "Full-time"})
    assert result.preferences_match.score == 50
    assert result.preferences_match.job_type_match is True
    assert result.preferences_match.work_mode_match is True


def test_full_frontend_match_percentage():
    result = compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB)
    # skills 50, experience mid vs mid 100, preferences (50 + 50) / 2 = 50
    assert result.skills_match.match_rate == 50
    assert result.experience_match.score == 100
    assert result.preferences_match.score == 50
    assert result.match_percentage == 65


def test_weighted_sum_rounds_half_up():
    # skills 1/4 -> 25, experience 100, preferences 50 -> 12.5 + 30 + 10 = 52.5
    candidate = {"skills": ["vue"]}
    job = {"required_skills": ["javascript", "css", "html", "vue"]}
    result = compute_match(candidate, job)
    assert result.skills_match.match_rate == 25
    assert result.match_percentage == 53


# ═══════════════════════════════════════════════════════════════════════════
# REASONS
# ═══════════════════════════════════════════════════════════════════════════

def test_reasons_for_frontend_scenario():
    result = compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB)
    assert result.reasons == [
        "Matches react",
        "Missing typescript",
        "Experience level matches (mid)",
    ]


def test_reasons_truncate_long_lists():
    candidate = {"skills": ["a1", "b2", "c3", "d4", "e5"], "years_of_experience": 0}
    job = {
        "required_skills": ["a1", "b2", "c3", "d4", "x1", "x2", "x3", "x4", "x5"],
        "experience_level": "lead",
    }
    result = compute_match(candidate, job)
    assert result.reasons == [
        "Matches a1, b2, c3 +1 more",
        "Missing x1, x2 +3 more",
        "Requires lead level experience",
    ]


def test_no_experience_reason_between_thresholds():
    config = MatchingConfig(experience_partial_credit_ceiling=100.0)
    result = MatchingAgent(config=config).match(
        {"years_of_experience": 4}, {"experience_level": "senior"}
    )
    # 2/3 * 100 = 66.7: below 70 so shortfall reason
    assert result.reasons == ["Requires senior level experience"]

    result = MatchingAgent(config=config).match(
        {"years_of_experience": 7}, {"experience_level": "lead"}
    )
    # 3/4 * 100 = 75: neither full credit nor shortfall
    assert result.experience_match.is_match is True
    assert result.reasons == []


# ═══════════════════════════════════════════════════════════════════════════
# CONFIG / INPUT SHAPES
# ═══════════════════════════════════════════════════════════════════════════

def test_custom_weights_are_normalised():
    config = MatchingConfig(skills_weight=1, experience_weight=0, preferences_weight=0)
    result = compute_match({"skills": ["react"]}, {"required_skills": ["react", "go"]}, config=config)
    assert result.match_percentage == 50


def test_zero_weights_do_not_divide_by_zero():
    config = MatchingConfig(skills_weight=0, experience_weight=0, preferences_weight=0)
    result = compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB, config=config)
    assert result.match_percentage == 0


def test_models_and_mappings_give_same_result():
    from_models = compute_match(
        CandidateProfile.model_validate(FRONTEND_CANDIDATE), Job.model_validate(FRONTEND_JOB)
    )
    from_dicts = compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB)
    assert from_models == from_dicts


def test_camel_case_input_keys():
    candidate = {
        "skills": [{"name": "Python"}],
        "yearsOfExperience": 3,
        "jobPreferences": {"preferredWorkModes": ["remote"]},
    }
    job = {"requiredSkills": ["python"], "experienceLevel": "Mid", "workMode": "Remote"}
    result = compute_match(candidate, job)
    assert result.skills_match.matched == ["python"]
    assert result.experience_match.candidate_level == "mid"
    assert result.experience_match.required_level == "mid"
    assert result.preferences_match.score == 50


def test_malformed_fields_never_raise():
    candidate = {
        "skills": [None, 42, {"level": "x"}, {"skill_name": "  "}, ["nested"], "Go"],
        "years_of_experience": "lots",
        "job_preferences": "remote please",
        "education": 5,
    }
    job = {
        "required_skills": "go",
        "preferred_skills": None,
        "experience_level": 3,
        "job_type": {"bad": True},
        "work_mode": None,
        "job_title": ["x"],
    }
    result = compute_match(candidate, job)
    assert result.skills_match.matched == ["go"]
    assert result.experience_match.candidate_level == "entry"
    # "3" is not a known level: entry floor
    assert result.experience_match.required_level == "3"
    assert result.experience_match.score == 100
    assert result.preferences_match.score == 50


def test_none_inputs():
    result = compute_match(None, None)
    assert result.match_percentage == 65


def test_payload_uses_camel_case():
    payload = compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB).to_payload()
    assert payload["matchPercentage"] == 65
    assert payload["skillsMatch"]["matchRate"] == 50
    assert payload["skillsMatch"]["matchedDetails"] == [{"skill": "react", "matchQuality": "exact"}]
    assert payload["skillsMatch"]["missingDetails"] == [{"skill": "typescript", "importance": "medium"}]
    assert payload["experienceMatch"]["isMatch"] is True
    assert payload["preferencesMatch"]["jobTypeMatch"] is True
    assert payload["reasons"][0] == "Matches react"


def test_verbose_logging(capsys):
    MatchingAgent(verbose=True).match(FRONTEND_CANDIDATE, FRONTEND_JOB)
    out = capsys.readouterr().out
    assert "[MatchingAgent]" in out
    assert "FINAL SCORE: 65/100" in out


def test_silent_by_default(capsys):
    compute_match(FRONTEND_CANDIDATE, FRONTEND_JOB)
    assert capsys.readouterr().out == ""
