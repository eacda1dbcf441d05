import copy
import unittest

from grammar_pipeline.contract import GrammarReport, ROOT_TOKEN, TaggedToken, TypedDependency
from grammar_pipeline.readability.interpret import interpret_flesch_kincaid
from grammar_pipeline.tam.rules import classify
from grammar_pipeline.validation.validator import raise_if_invalid, validate_report


def _sample_report():
    go = TaggedToken("go", "VB", 3)
    report = GrammarReport(imperatives=["Close"], sentence_count=2)
    report.features.modal = 1
    report.tam.merge(
        classify([TypedDependency("aux", go, TaggedToken("will", "MD", 2)), TypedDependency("root", ROOT_TOKEN, go)])
    )
    report.readability = interpret_flesch_kincaid(5).to_dict()
    return report.to_dict(include_edges=True)


class ReportValidatorTests(unittest.TestCase):
    def test_sample_report_valid(self):
        result = validate_report(_sample_report())
        self.assertTrue(result.ok, msg=str(result.errors))

    def test_report_without_edges_valid(self):
        result = validate_report(GrammarReport().to_dict())
        self.assertTrue(result.ok, msg=str(result.errors))

    def test_rejects_negative_counter(self):
        data = _sample_report()
        data["features"]["modal"] = -1
        result = validate_report(data)
        self.assertFalse(result.ok)
        self.assertIn("$.features.modal", [e.path for e in result.errors])

    def test_rejects_missing_category(self):
        data = _sample_report()
        del data["tam"]["past_perfect"]
        result = validate_report(data)
        self.assertFalse(result.ok)
        self.assertIn("$.tam.past_perfect", [e.path for e in result.errors])

    def test_rejects_count_edge_mismatch(self):
        data = _sample_report()
        data["tam"]["future_simple"]["count"] = 2
        self.assertFalse(validate_report(data).ok)

    def test_rejects_malformed_edge(self):
        data = _sample_report()
        broken = copy.deepcopy(data["tam"]["future_simple"]["edges"][0])
        del broken["governor"]
        broken["dependent"]["tag"] = 7
        data["tam"]["future_simple"]["edges"] = [broken]
        paths = [e.path for e in validate_report(data).errors]
        self.assertIn("$.tam.future_simple.edges[0].governor", paths)
        self.assertIn("$.tam.future_simple.edges[0].dependent.tag", paths)

    def test_rejects_non_string_imperative(self):
        data = _sample_report()
        data["imperatives"].append(3)
        self.assertFalse(validate_report(data).ok)

    def test_raise_if_invalid_lists_errors(self):
        data = _sample_report()
        data["sentence_count"] = "two"
        with self.assertRaises(ValueError) as ctx:
            raise_if_invalid(validate_report(data))
        self.assertIn("$.sentence_count", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
