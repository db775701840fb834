import unittest

from healthrisk.catalog.conditions import CONDITIONS, CONDITIONS_BY_ID
from healthrisk.catalog.lookup import get_condition, get_symptom, related_symptoms, search_symptoms
from healthrisk.errors import CatalogLookupError
from healthrisk.models import (
    Condition,
    ConditionMatch,
    ConditionSeverity,
    Prevalence,
    SelectedSymptom,
    Severity,
    UrgencyLevel,
)
from healthrisk.triage.matcher import ConditionMatcher, condition_matcher
from healthrisk.triage.session import merge_symptoms, run_symptom_check
from healthrisk.triage.urgency import classify_urgency
from healthrisk.nlp.extractor import extract_symptoms


def selected(*symptom_ids, severity=Severity.MODERATE):
    return [SelectedSymptom(symptom_id=s, severity=severity) for s in symptom_ids]


class ConditionMatcherTests(unittest.TestCase):
    def test_exact_common_symptoms_rank_first(self):
        matches = condition_matcher.find_matching_conditions(selected("fever", "cough"))

        top = matches[0]
        self.assertEqual(top.condition_id, "acute_respiratory_infection")
        self.assertEqual(top.missing_symptoms, [])
        # (0.7 * 1.0 + 0.1 * 1.0) * 1.2
        self.assertAlmostEqual(top.confidence, 0.96)

    def test_confidence_bounds_and_matching_subset(self):
        symptom_sets = [
            selected("fever"),
            selected("fever", "cough", "breathing", "chest_pain", severity=Severity.CRITICAL),
            selected("itching", "skin_rash", severity=Severity.MILD),
            selected("diarrhea", "vomiting", "fever", "jaundice"),
        ]

        for symptoms in symptom_sets:
            for condition in CONDITIONS:
                match = condition_matcher.calculate_condition_match(condition, symptoms)
                self.assertGreaterEqual(match.confidence, 0.0)
                self.assertLessEqual(match.confidence, 1.0)
                allowed = set(condition.common_symptoms) | set(condition.rare_symptoms)
                self.assertTrue(set(match.matching_symptoms) <= allowed)

    def test_results_are_filtered_sorted_and_truncated(self):
        matches = condition_matcher.find_matching_conditions(
            selected("fever", "cough", "headache", "body_pain", "fatigue")
        )

        self.assertLessEqual(len(matches), 5)
        confidences = [m.confidence for m in matches]
        self.assertEqual(confidences, sorted(confidences, reverse=True))
        self.assertTrue(all(c > 0.1 for c in confidences))

    def test_identical_input_gives_identical_output(self):
        symptoms = selected("fever", "headache", "joint_pain")

        first = condition_matcher.find_matching_conditions(symptoms)
        second = condition_matcher.find_matching_conditions(symptoms)

        self.assertEqual([m.model_dump() for m in first], [m.model_dump() for m in second])

    def test_condition_without_common_symptoms_scores_rare_only(self):
        condition = Condition(
            id="rare_only",
            name={"en": "Rare only"},
            description={"en": ""},
            category="general",
            severity=ConditionSeverity.MINOR,
            common_symptoms=[],
            rare_symptoms=["fever"],
            urgency=UrgencyLevel.LOW,
            prevalence_in_migrants=Prevalence.MEDIUM,
        )
        matcher = ConditionMatcher([condition])

        match = matcher.calculate_condition_match(condition, selected("cough", severity=Severity.MILD))

        self.assertAlmostEqual(match.confidence, 0.1)
        self.assertEqual(matcher.find_matching_conditions(selected("cough", severity=Severity.MILD)), [])

    def test_severity_match(self):
        condition = CONDITIONS_BY_ID["heart_attack"]

        self.assertEqual(ConditionMatcher.calculate_severity_match(condition, []), 0.0)
        self.assertEqual(
            ConditionMatcher.calculate_severity_match(condition, selected("chest_pain", severity=Severity.CRITICAL)),
            1.0,
        )
        self.assertEqual(
            ConditionMatcher.calculate_severity_match(condition, selected("chest_pain", severity=Severity.MILD)),
            0.25,
        )

    def test_reasoning_tiers(self):
        condition = CONDITIONS_BY_ID["acute_respiratory_infection"]

        self.assertTrue(ConditionMatcher.generate_reasoning(condition, ["fever"], 0.81).startswith("High"))
        self.assertTrue(ConditionMatcher.generate_reasoning(condition, [], 0.6).startswith("Possible"))
        self.assertTrue(ConditionMatcher.generate_reasoning(condition, [], 0.4).startswith("Low"))
        self.assertTrue(ConditionMatcher.generate_reasoning(condition, [], 0.3).startswith("Unlikely"))


class UrgencyTests(unittest.TestCase):
    def match(self, condition_id):
        return ConditionMatch(condition_id=condition_id, confidence=0.5, reasoning="")

    def test_no_matches_is_low(self):
        self.assertEqual(classify_urgency([]), UrgencyLevel.LOW)

    def test_highest_urgency_wins(self):
        matches = [self.match("common_cold"), self.match("heart_attack"), self.match("dengue")]

        self.assertEqual(classify_urgency(matches), UrgencyLevel.EMERGENCY)

    def test_unknown_conditions_are_ignored(self):
        self.assertEqual(classify_urgency([self.match("unknown"), self.match("influenza")]), UrgencyLevel.MEDIUM)


class SymptomCheckSessionTests(unittest.TestCase):
    def test_explicit_selection_overrides_voice(self):
        extracted = extract_symptoms("slight fever and cough", "en")
        explicit = selected("fever", severity=Severity.SEVERE)

        merged = {s.symptom_id: s for s in merge_symptoms(extracted, explicit)}

        self.assertEqual(set(merged), {"fever", "cough"})
        self.assertEqual(merged["fever"].severity, Severity.SEVERE)

    def test_session_from_transcript(self):
        result = run_symptom_check(transcript="chest pain and difficulty breathing, sweating a lot", language="en")

        self.assertEqual(result.urgency, UrgencyLevel.EMERGENCY)
        self.assertIn("heart_attack", [m.condition_id for m in result.matches])
        self.assertTrue(result.recommendations)

    def test_follow_up_questions_for_missing_symptoms(self):
        result = run_symptom_check(selected=selected("fever", "headache"), language="en")

        self.assertTrue(result.follow_up_questions)
        self.assertLessEqual(len(result.follow_up_questions), 6)
        self.assertTrue(all(q.startswith("Do you also have") for q in result.follow_up_questions))

    def test_empty_session(self):
        result = run_symptom_check()

        self.assertEqual(result.matches, [])
        self.assertEqual(result.urgency, UrgencyLevel.LOW)


class CatalogLookupTests(unittest.TestCase):
    def test_lookups(self):
        self.assertEqual(get_symptom("fever").id, "fever")
        self.assertEqual(get_condition("dengue").urgency, UrgencyLevel.HIGH)
        self.assertIn("chills", [s.id for s in related_symptoms("fever")])

    def test_unknown_ids_raise(self):
        with self.assertRaises(CatalogLookupError):
            get_symptom("nope")
        with self.assertRaises(CatalogLookupError):
            get_condition("nope")

    def test_search(self):
        self.assertIn("fever", [s.id for s in search_symptoms("temperature")])
        self.assertEqual(search_symptoms("   "), [])


if __name__ == "__main__":
    unittest.main()
