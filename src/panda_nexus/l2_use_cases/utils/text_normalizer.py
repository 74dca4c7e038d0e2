"""Pure local text correction: common misspellings, capitalization, terminal period."""

from __future__ import annotations

import re

CORRECTIONS: dict[str, str] = {
    'teh': 'the',
    'recieve': 'receive',
    'seperate': 'separate',
    'definately': 'definitely',
    'occured': 'occurred',
    'neccessary': 'necessary',
    'accomodate': 'accommodate',
    'begining': 'beginning',
    'beleive': 'believe',
    'calender': 'calendar',
    'cemetary': 'cemetery',
    'changable': 'changeable',
    'collegue': 'colleague',
    'comming': 'coming',
    'commited': 'committed',
    'concious': 'conscious',
    'embarass': 'embarrass',
    'enviroment': 'environment',
    'existance': 'existence',
    'experiance': 'experience',
    'familar': 'familiar',
    'finaly': 'finally',
    'foriegn': 'foreign',
    'goverment': 'government',
    'grammer': 'grammar',
    'independant': 'independent',
    'intergrate': 'integrate',
    'knowlege': 'knowledge',
    'maintainance': 'maintenance',
    'occassion': 'occasion',
    'persue': 'pursue',
    'priviledge': 'privilege',
    'recomend': 'recommend',
    'refered': 'referred',
    'relevent': 'relevant',
    'responsable': 'responsible',
    'succesful': 'successful',
    'tommorow': 'tomorrow',
    'truely': 'truly',
    'untill': 'until',
    'usefull': 'useful',
    'wierd': 'weird',
    'writting': 'writing',
}

_MISSPELLING_RE = re.compile(r'\b(' + '|'.join(map(re.escape, CORRECTIONS)) + r')\b', re.IGNORECASE)
_PRONOUN_RE = re.compile(r'\bi\b')
_SENTENCE_START_RE = re.compile(r'(^\s*|[.!?]\s+)([a-z])')
_TERMINAL = ('.', '!', '?')


def _match_case(original: str, replacement: str) -> str:
    if original.isupper() and len(original) > 1:
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def _correct(match: re.Match[str]) -> str:
    word = match.group(0)
    return _match_case(word, CORRECTIONS[word.lower()])


def normalize(text: str) -> str:
    """Apply the local correction pass. Total and idempotent; blank input is returned as-is."""
    if not text.strip():
        return text

    corrected = _MISSPELLING_RE.sub(_correct, text)
    corrected = _PRONOUN_RE.sub('I', corrected)
    corrected = _SENTENCE_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), corrected)
    if not corrected.rstrip().endswith(_TERMINAL):
        corrected = corrected.rstrip() + '.'
    return corrected
