"""
Test preference alignment
"""

from job_matching.models import Job, JobPreferences
from job_matching.services.preferences import align_preferences, axis_matches

REMOTE_FULL_TIME = Job(job_type="Full-time", work_mode="Remote")


def test_no_preferences_is_neutral():
    result = align_preferences(None, REMOTE_FULL_TIME)
    assert result.score == 50
    assert result.job_type_match is True
    assert result.work_mode_match is True


def test_blank_preferences_are_ignored():
    prefs = JobPreferences(preferred_job_types=["", "  "], preferred_work_modes=[])
    assert align_preferences(prefs, REMOTE_FULL_TIME).score == 50


def test_both_axes_match():
    prefs = JobPreferences(preferred_job_types=["full-time"], preferred_work_modes=["REMOTE"])
    result = align_preferences(prefs, REMOTE_FULL_TIME)
    assert result.score == 50
    assert result.job_type_match is True
    assert result.work_mode_match is True


def test_one_of_two_axes_matches():
    prefs = JobPreferences(preferred_job_types=["Contract"], preferred_work_modes=["Remote"])
    result = align_preferences(prefs, REMOTE_FULL_TIME)
    assert result.score == 25
    # combined flags: 25 is still at the threshold
    assert result.job_type_match is True
    assert result.work_mode_match is True


def test_single_axis_mismatch():
    prefs = JobPreferences(preferred_work_modes=["On-site"])
    result = align_preferences(prefs, REMOTE_FULL_TIME)
    assert result.score == 0
    assert result.job_type_match is False
    assert result.work_mode_match is False


def test_per_axis_flags():
    prefs = JobPreferences(preferred_job_types=["Contract"], preferred_work_modes=["Remote"])
    result = align_preferences(prefs, REMOTE_FULL_TIME, per_axis_flags=True)
    assert result.score == 25
    assert result.job_type_match is False
    assert result.work_mode_match is True


def test_per_axis_flags_unchecked_axis_is_true():
    prefs = JobPreferences(preferred_work_modes=["On-site"])
    result = align_preferences(prefs, REMOTE_FULL_TIME, per_axis_flags=True)
    assert result.job_type_match is True
    assert result.work_mode_match is False


def test_job_without_value_does_not_match_stated_preference():
    prefs = JobPreferences(preferred_job_types=["Full-time"])
    assert align_preferences(prefs, Job()).score == 0


def test_axis_matches_is_containment():
    assert axis_matches(["remote"], "Remote (EU only)")
    assert not axis_matches(["hybrid"], "Remote")
    assert not axis_matches(["remote"], None)
