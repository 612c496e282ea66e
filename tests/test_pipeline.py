import pytest

from oral_reading import pipeline
from oral_reading.exceptions import InvalidTimingError
from oral_reading.models import Severity, WordStatus
from oral_reading.pipeline import ReadingAssessment, assess_reading


@pytest.fixture()
def phase_scenario():
    return (
        ["The", "phase", "ended"],
        [
            {"word": "the", "startTime": 0.0, "endTime": 0.3},
            {"word": "faze", "startTime": 0.3, "endTime": 0.7},
            {"word": "ended", "startTime": 0.7, "endTime": 1.1},
        ],
    )


def test_assess_clean_reading(cat_sat_scenario):
    ocr, spoken = cat_sat_scenario
    assessment = assess_reading(ocr, spoken)
    assert isinstance(assessment, ReadingAssessment)
    assert assessment.metrics.accuracy == 100
    assert assessment.audio_duration == 0.9
    # 200 wpm is above the target range
    assert assessment.metrics.words_per_minute == 200
    assert assessment.severity is Severity.MILD
    assert assessment.error_patterns == ()
    assert assessment.primary_pattern is None


def test_assessment_payload(cat_sat_scenario):
    ocr, spoken = cat_sat_scenario
    data = assess_reading(ocr, spoken).to_dict()
    assert set(data) == {
        "matching", "metrics", "errorPatterns", "severity",
        "audioDuration", "strengths", "struggles", "primaryPattern",
    }
    assert data["metrics"]["accuracy"] == 100
    assert data["matching"]["correctCount"] == 3
    assert data["severity"] == "mild"


def test_feedback_extracted():
    ocr = ["The", "elephant", "walked", "slowly"]
    spoken = [
        {"word": "the", "startTime": 0.0, "endTime": 0.2},
        {"word": "elephant", "startTime": 0.2, "endTime": 0.8},
        {"word": "walks", "startTime": 0.8, "endTime": 1.2},
        {"word": "slowly", "startTime": 1.2, "endTime": 1.7},
    ]
    assessment = assess_reading(ocr, spoken)
    assert assessment.strengths == ("elephant", "slowly")
    assert assessment.struggles == (("walked", "walks"),)
    assert assessment.primary_pattern is not None


def test_invalid_timing_rejected():
    spoken = [
        {"word": "the", "startTime": 0.5, "endTime": 0.8},
        {"word": "cat", "startTime": 0.1, "endTime": 0.3},
    ]
    with pytest.raises(InvalidTimingError):
        assess_reading(["The", "cat"], spoken)
    assert assess_reading(["The", "cat"], spoken, validate=False).metrics.total_words == 2


def test_static_tables_by_default(phase_scenario):
    ocr, spoken = phase_scenario
    words = assess_reading(ocr, spoken).result.words
    assert words[1].status is WordStatus.SUBSTITUTED


def test_cmudict_homophones_extend_tables(monkeypatch, phase_scenario):
    monkeypatch.setattr(pipeline, "find_cmudict_homophones", lambda words: [("faze", "phase")])
    ocr, spoken = phase_scenario
    words = assess_reading(ocr, spoken, use_cmudict=True).result.words
    assert words[1].status is WordStatus.CORRECT


def test_missing_cmudict_falls_back_with_warning(monkeypatch, phase_scenario, caplog):
    def unavailable(words):
        raise LookupError("cmudict not downloaded")

    monkeypatch.setattr(pipeline, "find_cmudict_homophones", unavailable)
    ocr, spoken = phase_scenario
    with caplog.at_level("WARNING", logger="oral_reading.pipeline"):
        words = assess_reading(ocr, spoken, use_cmudict=True).result.words
    assert words[1].status is WordStatus.SUBSTITUTED
    assert "CMUdict unavailable" in caplog.text
