"""Stage 2: Line-by-line correction with multiprocessing support."""

import threading
from multiprocessing import Pool

from tqdm import tqdm

from typofix.core import CorrectionResult, Lexicon, correct_text_with_records

# Thread-local storage for the lexicon (set once per worker)
_worker_state = threading.local()


def init_worker(lexicon: Lexicon) -> None:
    """Store the shared lexicon in the worker process."""
    _worker_state.lexicon = lexicon


def correct_line_worker(line: str) -> CorrectionResult:
    """Worker function for multiprocessing."""
    return correct_text_with_records(line, _worker_state.lexicon)


def correct_lines(
    lines: list[str],
    lexicon: Lexicon,
    jobs: int = 1,
    verbose: bool = False,
) -> list[CorrectionResult]:
    """Correct each line independently, preserving order.

    Args:
        lines: Lines including their line endings
        lexicon: Frozen lexicon shared by all workers
        jobs: Number of worker processes (1 = in-process)
        verbose: Show a progress bar

    Returns:
        One CorrectionResult per line, in input order
    """
    if jobs > 1 and len(lines) > 1:
        with Pool(processes=jobs, initializer=init_worker, initargs=(lexicon,)) as pool:
            results = pool.imap(correct_line_worker, lines, chunksize=64)
            if verbose:
                results = tqdm(results, total=len(lines), desc="Correcting lines", unit="line")
            return list(results)

    lines_iter = lines
    if verbose:
        lines_iter = tqdm(lines, desc="Correcting lines", unit="line")
    return [correct_text_with_records(line, lexicon) for line in lines_iter]
