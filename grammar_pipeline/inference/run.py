"""Grammar analysis runner: spaCy tagging -> lexical features -> parsing -> TAM rules -> validator."""

from __future__ import annotations

import argparse
import json
import logging
import os
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from grammar_pipeline.contract import GrammarReport, TaggedToken
from grammar_pipeline.lexical.features import count_features
from grammar_pipeline.lexical.imperatives import find_imperatives
from grammar_pipeline.parse.spacy_parser import DependencyParserAdapter, get_shared_model, tag_sentences
from grammar_pipeline.readability.interpret import interpret_flesch_kincaid
from grammar_pipeline.tam.rules import classify
from grammar_pipeline.validation.validator import raise_if_invalid, validate_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


def analyze_sentence(tokens: Sequence[TaggedToken], adapter: DependencyParserAdapter, report: GrammarReport) -> None:
    count_features(tokens, report.features)
    report.imperatives.extend(find_imperatives(tokens))
    edges = adapter.parse(tokens)
    report.tam.merge(classify(edges))
    report.sentence_count += 1


def analyze_sentences(
    sentences: Iterable[Sequence[TaggedToken]],
    adapter: DependencyParserAdapter,
) -> GrammarReport:
    report = GrammarReport()
    for tokens in sentences:
        analyze_sentence(tokens, adapter, report)
    logger.debug(
        "Analyzed %d sentences: %d imperatives, tam=%s",
        report.sentence_count,
        len(report.imperatives),
        report.tam.counts(),
    )
    return report


def run_pipeline(
    text: str,
    spacy_model: Optional[str] = None,
    readability_score: Optional[float] = None,
    include_edges: bool = False,
    model=None,
) -> dict:
    model = model or get_shared_model(spacy_model)
    adapter = DependencyParserAdapter(model)

    sentences = tag_sentences(text, model)
    report = analyze_sentences(sentences, adapter)
    if readability_score is not None:
        report.readability = interpret_flesch_kincaid(readability_score).to_dict()

    result = report.to_dict(include_edges=include_edges)
    raise_if_invalid(validate_report(result))
    return result


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    with open(args.input, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Count grammar features and tense/aspect forms in English text")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", default=None)
    source.add_argument("--input", default=None, help="UTF-8 text file to analyze.")
    parser.add_argument(
        "--spacy-model",
        default=None,
        help="spaCy pipeline with a dependency parser (default: $GRAMMAR_SPACY_MODEL or en_core_web_sm).",
    )
    parser.add_argument("--readability-score", type=float, default=None, help="Flesch-Kincaid grade to interpret.")
    parser.add_argument("--include-edges", action="store_true", help="Include matched dependency edges per category.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--output", default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    result = run_pipeline(
        text=_read_text(args),
        spacy_model=args.spacy_model,
        readability_score=args.readability_score,
        include_edges=args.include_edges,
    )

    out_path = args.output
    if out_path is None:
        os.makedirs("inference_results", exist_ok=True)
        ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        out_path = os.path.join("inference_results", f"grammar_report_{ts}.json")

    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(result, f, ensure_ascii=False, indent=2)

    print(f"Saved: {out_path}")


if __name__ == "__main__":
    main()
