"""
Inflection Service

Deterministic plural/singular spelling variants used for vocabulary and
alias lookups. The vocabulary stores singular names while recipe text is
mostly plural, so every lookup tries a handful of spellings.
"""


def _dedupe(phrase, variants):
    """Drop empties, the phrase itself, and repeats, preserving order."""
    seen = {phrase}
    result = []
    for variant in variants:
        if variant and variant not in seen:
            seen.add(variant)
            result.append(variant)
    return result


def singular_forms(word):
    """Possible singular spellings of a word ending in 's' ([] otherwise)."""
    if word.endswith('ies'):
        return [word[:-3] + 'y']
    if word.endswith('es'):
        return [word[:-2], word[:-1]]
    if word.endswith('s'):
        return [word[:-1]]
    return []


def singularize_last_word(phrase):
    """
    Variants of a multi-word phrase with only its last word singularized.

    'red onions' -> ['red onion']. Single words and phrases whose last word
    does not end in 's' give [].
    """
    words = phrase.split()
    if len(words) < 2 or not words[-1].endswith('s'):
        return []
    head = ' '.join(words[:-1])
    return [f"{head} {form}" for form in singular_forms(words[-1]) if form]


def name_variants(phrase):
    """
    Spelling variants tried against vocabulary names.

    Rules, in order:
    - '...ies' -> '...y', '...i', '...es'   (berries -> berry, chilies -> chiles)
    - '...es'  -> strip 'es', strip 's'     (potatoes -> potato, olives -> olive)
    - '...s'   -> strip 's'                 (onions -> onion)
    - '...y'   -> '...ies'
    - '...o' / '...i' -> append 'es'
    - any non-'s' ending -> append 's'
    - multi-word with plural last word -> singularize just the last word
    """
    phrase = phrase.strip().lower()
    if not phrase:
        return []

    variants = []
    if phrase.endswith('ies'):
        stem = phrase[:-3]
        variants += [stem + 'y', stem + 'i', stem + 'es']
    elif phrase.endswith('es'):
        variants += [phrase[:-2], phrase[:-1]]
    elif phrase.endswith('s'):
        variants.append(phrase[:-1])
    else:
        if phrase.endswith('y'):
            variants.append(phrase[:-1] + 'ies')
        if phrase.endswith(('o', 'i')):
            variants.append(phrase + 'es')
        variants.append(phrase + 's')

    variants += singularize_last_word(phrase)
    return _dedupe(phrase, variants)


def alias_variants(phrase):
    """Plain plural, plain singular, and singularized-last-word variants for alias lookup."""
    phrase = phrase.strip().lower()
    if not phrase:
        return []

    variants = [phrase + 's']
    if phrase.endswith('s'):
        variants.append(phrase[:-1])
    variants += singularize_last_word(phrase)
    return _dedupe(phrase, variants)
