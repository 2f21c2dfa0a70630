from app.models.transcript import CaptionTrack
from app.services.track_selector import select_english_track

EN_ASR = CaptionTrack("en", "asr", "https://example.com/en-asr")
EN_MANUAL = CaptionTrack("en", None, "https://example.com/en")
EN_GB = CaptionTrack("en-GB", None, "https://example.com/en-gb")
ES = CaptionTrack("es", None, "https://example.com/es")


def test_manual_english_preferred_in_any_order():
    assert select_english_track([EN_ASR, EN_MANUAL]) is EN_MANUAL
    assert select_english_track([EN_MANUAL, EN_ASR]) is EN_MANUAL


def test_auto_generated_english_when_only_option():
    assert select_english_track([EN_ASR]) is EN_ASR


def test_exact_en_beats_regional_variant():
    assert select_english_track([EN_GB, EN_ASR]) is EN_ASR


def test_regional_variant_as_last_resort():
    assert select_english_track([ES, EN_GB]) is EN_GB


def test_no_english_returns_none():
    assert select_english_track([ES]) is None
    assert select_english_track([]) is None
