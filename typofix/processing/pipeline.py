"""Main processing pipeline."""

import time

from loguru import logger

from typofix.core import Config, CorrectionResult, Lexicon, build_dictionary
from typofix.processing.batch import correct_lines
from typofix.processing.dictionary_loading import load_dictionaries
from typofix.processing.text_io import read_input, write_output
from typofix.reports import write_corrections_report
from typofix.utils.debug import log_if_debug_word


def build_lexicon(config: Config, verbose: bool = False) -> Lexicon:
    """Stage 1: load word sources and build the frozen lexicon."""
    if verbose:
        logger.info("Stage 1: Loading dictionary...")
    dict_data = load_dictionaries(config, verbose)
    return build_dictionary(dict_data.words, dict_data.frequencies, config.engine_config())


def _log_debug_results(results: list[CorrectionResult], config: Config) -> None:
    if not config.debug_words:
        return
    for result in results:
        for record in result.corrections:
            log_if_debug_word(
                record.original,
                f"Corrected to '{record.corrected}' "
                f"(distance: {record.distance}, score: {record.score})",
                config.debug_words,
                "Correction",
            )
        for word in result.unresolved:
            log_if_debug_word(word, "No correction within reach", config.debug_words, "Correction")


def run_pipeline(config: Config) -> list[CorrectionResult]:
    """Load the dictionary, correct the input and write the output.

    Args:
        config: Configuration object

    Returns:
        The correction results (one per line in line mode, otherwise one)
    """
    verbose = config.verbose
    start_time = time.time()

    lexicon = build_lexicon(config, verbose)
    if verbose:
        logger.info(f"  Dictionary ready with {len(lexicon)} words")
        logger.info("Stage 2: Correcting text...")

    text = read_input(config.text, config.input)

    if config.lines:
        results = correct_lines(text.splitlines(keepends=True), lexicon, config.jobs, verbose)
    else:
        results = correct_lines([text], lexicon, 1, False)

    corrected = "".join(result.text for result in results)
    _log_debug_results(results, config)

    if verbose:
        total = sum(len(result.corrections) for result in results)
        unresolved = sum(len(result.unresolved) for result in results)
        logger.info(f"  Made {total} corrections, {unresolved} words left unresolved")

    write_output(corrected, config.output)

    if config.report:
        write_corrections_report(results, config.report)

    if verbose:
        logger.info(f"  Finished in {time.time() - start_time:.2f}s")

    return results
