import unittest

from healthrisk.models import Severity
from healthrisk.nlp.extractor import (
    estimate_severity,
    extract_district,
    extract_symptoms,
    normalize_text,
)
from healthrisk.nlp.language import language_priority, localized


class ExtractSymptomsTests(unittest.TestCase):
    def test_finds_keywords_with_voice_confidence(self):
        extracted = extract_symptoms("I have a cough and fever since yesterday", "en", 1.0)

        ids = {s.symptom for s in extracted}
        self.assertEqual(ids, {"cough", "fever"})
        for candidate in extracted:
            self.assertAlmostEqual(candidate.confidence, 0.8)

    def test_confidence_scales_with_transcription_confidence(self):
        extracted = extract_symptoms("bad headache", "en", 0.5)

        self.assertEqual(len(extracted), 1)
        self.assertAlmostEqual(extracted[0].confidence, 0.4)

    def test_context_window_and_severity(self):
        extracted = extract_symptoms("I have a very painful cough today", "en")

        cough = extracted[0]
        self.assertEqual(cough.symptom, "cough")
        self.assertIn("cough", cough.context)
        self.assertLessEqual(len(cough.context), len("cough") + 40)
        self.assertEqual(cough.severity, Severity.SEVERE)

    def test_hindi_keywords(self):
        extracted = extract_symptoms("मुझे बुखार है", "hi")

        self.assertEqual([s.symptom for s in extracted], ["fever"])

    def test_unknown_language_falls_back_to_english(self):
        extracted = extract_symptoms("fever", "xx")

        self.assertEqual([s.symptom for s in extracted], ["fever"])

    def test_one_candidate_per_symptom(self):
        extracted = extract_symptoms("fever, high temperature and hot body", "en")

        self.assertEqual([s.symptom for s in extracted], ["fever"])

    def test_no_hits_or_empty_text(self):
        self.assertEqual(extract_symptoms("I feel fine", "en"), [])
        self.assertEqual(extract_symptoms("", "en"), [])
        self.assertEqual(extract_symptoms(None, "en"), [])


class SeverityEstimationTests(unittest.TestCase):
    def test_most_severe_word_wins(self):
        self.assertEqual(estimate_severity("unbearable and very bad", "en"), Severity.CRITICAL)
        self.assertEqual(estimate_severity("really bad", "en"), Severity.SEVERE)
        self.assertEqual(estimate_severity("a bad one", "en"), Severity.MODERATE)
        self.assertEqual(estimate_severity("since monday", "en"), Severity.MILD)

    def test_unknown_language_uses_english_table(self):
        self.assertEqual(estimate_severity("terrible", "fr"), Severity.SEVERE)


class HelperTests(unittest.TestCase):
    def test_normalize_text(self):
        self.assertEqual(normalize_text("  Bad\n  COUGH "), "bad cough")

    def test_extract_district(self):
        self.assertEqual(extract_district("I work in Ernakulam near the port"), "ernakulam")
        self.assertIsNone(extract_district("I work in Chennai"))

    def test_language_priority_and_fallback(self):
        self.assertEqual(language_priority("ML"), ["ml", "en"])
        self.assertEqual(language_priority(None), ["en"])
        self.assertEqual(localized({"en": "Fever", "hi": "बुखार"}, "hi"), "बुखार")
        self.assertEqual(localized({"en": "Fever"}, "ta"), "Fever")
        self.assertIsNone(localized({"hi": "बुखार"}, "ta"))


if __name__ == "__main__":
    unittest.main()
