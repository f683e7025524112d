"""
Ingredient Search Service

Runs candidate extraction and vocabulary matching over a batch of raw
ingredient lines and partitions them into matched (grouped by category)
and unmatched lines.
"""

import logging
import time
from dataclasses import asdict, dataclass
from typing import Optional

from constants import CATEGORY_NAMES, DEFAULT_CATEGORY
from .extraction import extract_candidate_groups
from .matching import match_candidate
from .parsing import parse_ingredient

logger = logging.getLogger(__name__)

BATCH_SIZE = 5
MAX_CANDIDATES = 3
SEARCH_TIMEOUT = 60  # seconds


class SearchTimeout(Exception):
    """Raised when a search runs past its deadline. No partial result is kept."""
    pass


@dataclass
class MatchResult:
    original_text: str
    matched_term: str
    ingredient_id: int
    name: str
    category_id: int
    category: str
    match_type: str
    matched_alias: Optional[str] = None
    amount: str = ''
    unit: str = ''

    def to_dict(self):
        return asdict(self)


def chunked(items, size):
    """Split a list into consecutive chunks of at most `size` items."""
    return [items[i:i + size] for i in range(0, len(items), size)]


def _check_deadline(deadline):
    if deadline is not None and time.monotonic() >= deadline:
        raise SearchTimeout('Ingredient search took too long')


def match_line(line, candidate_groups, store, max_candidates=MAX_CANDIDATES, text=None):
    """
    Match one line's candidate groups against the vocabulary.

    Within a group, candidates (capped to max_candidates) are tried in order
    and the first hit wins. Each "or" alternative is its own group, so a line
    like "quinoa or brown rice" can yield one match per side.

    Amount and unit are parsed from text (the cleaned line) when given;
    original_text is always the line as received.

    Returns:
        List of MatchResult ([] when nothing matched)
    """
    parsed = parse_ingredient(line if text is None else text)
    results = []
    for group in candidate_groups:
        for candidate in group[:max_candidates]:
            match = match_candidate(candidate, store)
            if match is None:
                continue
            entry = match.entry
            results.append(MatchResult(
                original_text=line,
                matched_term=candidate,
                ingredient_id=entry.id,
                name=entry.name,
                category_id=entry.category_id,
                category=entry.category,
                match_type=match.match_type,
                matched_alias=match.matched_alias,
                amount=parsed.amount,
                unit=parsed.unit,
            ))
            break
    return results


def _prepare(line, clean):
    return clean(line) if clean else (line or '')


def process_batch(lines, store, max_candidates=MAX_CANDIDATES, deadline=None, clean=None):
    """
    Match every line of one batch, sequentially.

    An error while extracting candidates propagates so the caller can fail
    the whole batch. An error while matching marks only that line unmatched.
    Candidates come from clean(line) when a clean function is given; the
    raw line is what gets reported.

    Returns:
        (matched, unmatched) lists
    """
    matched = []
    unmatched = []

    for line in lines:
        _check_deadline(deadline)
        text = _prepare(line, clean)
        if not text.strip():
            continue

        groups = extract_candidate_groups(text, store)
        logger.debug("Candidates for %r: %s", line, groups)

        try:
            results = match_line(line, groups, store, max_candidates, text=text)
        except Exception:
            logger.exception("Matching failed for %r, marking unmatched", line)
            results = []

        if results:
            matched.extend(results)
        else:
            logger.debug("No match for %r", line)
            unmatched.append(line)

    return matched, unmatched


def dedupe_matches(matches):
    """Keep the first match per ingredient id."""
    seen = set()
    unique = []
    for match in matches:
        if match.ingredient_id not in seen:
            seen.add(match.ingredient_id)
            unique.append(match)
    return unique


def group_by_category(matches, category_names=None):
    """
    Group matches by category name, in order of first appearance.

    Category names come from the category_names table (id -> name); a
    category id missing from it falls back to the match's own category.
    """
    category_names = category_names or CATEGORY_NAMES
    grouped = {}
    for match in matches:
        name = category_names.get(match.category_id) or match.category or DEFAULT_CATEGORY
        grouped.setdefault(name, []).append(match)
    return grouped


def search_ingredients(lines, store, batch_size=BATCH_SIZE, max_candidates=MAX_CANDIDATES,
                       timeout=SEARCH_TIMEOUT, category_names=None, clean=None):
    """
    Partition raw ingredient lines into matched and unmatched.

    Lines are processed in batches of batch_size. If a batch fails, all of
    its non-blank lines are reported unmatched and the next batch proceeds.
    Matches are de-duplicated by ingredient id (earliest line wins) and
    grouped by category once every batch is done.

    Args:
        lines: raw ingredient lines (blank lines are skipped)
        store: VocabularyStore
        batch_size: lines per batch
        max_candidates: candidates tried per line (per alternative)
        timeout: seconds before SearchTimeout is raised (None for no limit)
        category_names: category id -> name table used for grouping
        clean: optional function applied to each line before matching; the
            unmodified line is still the one reported

    Returns:
        dict with matched (category -> [MatchResult]), unmatched ([str]),
        total_matched and total_unmatched

    Raises:
        SearchTimeout: the deadline passed before all lines were processed
    """
    deadline = time.monotonic() + timeout if timeout is not None else None
    matched = []
    unmatched = []

    batches = chunked(list(lines), batch_size)
    for index, batch in enumerate(batches, 1):
        try:
            batch_matched, batch_unmatched = process_batch(batch, store, max_candidates, deadline, clean)
        except SearchTimeout:
            raise
        except Exception:
            logger.exception("Batch %d/%d failed, marking its lines unmatched", index, len(batches))
            batch_matched = []
            batch_unmatched = [line for line in batch if _prepare(line, clean).strip()]

        matched.extend(batch_matched)
        unmatched.extend(batch_unmatched)
        logger.info("Batch %d/%d complete. Matched: %d, Unmatched: %d",
                    index, len(batches), len(batch_matched), len(batch_unmatched))

    unique = dedupe_matches(matched)
    grouped = group_by_category(unique, category_names)

    return {
        'matched': grouped,
        'unmatched': unmatched,
        'total_matched': len(unique),
        'total_unmatched': len(unmatched),
    }
