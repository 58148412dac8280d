"""
Utility functions for dates, ages, formatting, hashing, and canonical text.
"""

import hashlib
import math
import re
import unicodedata
from datetime import date, datetime, timezone
from typing import Any, List, Optional


WORDS_PER_PAGE = 300

TRAILING_WHITESPACE_PATTERN = re.compile(r'[ \t]+$', re.MULTILINE)
WORD_PATTERN = re.compile(r'\w+', re.UNICODE)


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the form stored in the database)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a date from a date, datetime or ISO string.

    Args:
        value: Date-like input

    Returns:
        The parsed date, or None when the input is empty or malformed
    """
    if value is None or value == '':
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.strptime(text, '%Y-%m-%d').date()
        except ValueError:
            pass

        try:
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
        except ValueError:
            return None

    return None


def age_on(dob: date, as_of: date) -> int:
    """
    Age in completed years on a reference date.

    Args:
        dob: Date of birth
        as_of: Reference date

    Returns:
        Age in whole years (negative when dob lies after as_of)
    """
    age = as_of.year - dob.year
    if (as_of.month, as_of.day) < (dob.month, dob.day):
        age -= 1
    return age


def is_minor(dob: Optional[date], as_of: date, age_of_majority: int = 18) -> bool:
    """True when a person born on dob is under the age of majority on as_of."""
    if dob is None:
        return False
    return age_on(dob, as_of) < age_of_majority


def format_date(value: Any, language: str = 'en') -> str:
    """
    Format a date for a will document.

    English uses "15 January 1980"; Czech and Slovak use "15. 1. 1980";
    German uses "15.01.1980".
    """
    parsed = parse_date(value)
    if parsed is None:
        return '' if value is None else str(value)

    if language in ('cs', 'sk'):
        return f'{parsed.day}. {parsed.month}. {parsed.year}'
    if language == 'de':
        return parsed.strftime('%d.%m.%Y')
    return f'{parsed.day} {parsed.strftime("%B")} {parsed.year}'


def format_amount(amount: Any, currency: str = '', language: str = 'en') -> str:
    """
    Format a monetary amount with the grouping used by the document language.

    Args:
        amount: Numeric amount
        currency: ISO currency code appended after the amount
        language: Document language code

    Returns:
        Formatted amount string
    """
    if amount is None or amount == '':
        return ''

    try:
        num = float(amount)
    except (ValueError, TypeError):
        return str(amount)
    if not math.isfinite(num):
        return str(amount)

    if num == int(num):
        text = f'{int(num):,}'
    else:
        text = f'{num:,.2f}'

    if language == 'de':
        text = text.replace(',', '_').replace('.', ',').replace('_', '.')
    elif language in ('cs', 'sk'):
        text = text.replace(',', ' ').replace('.', ',')

    return f'{text} {currency}'.strip()


def format_percentage(value: Any) -> str:
    """
    Format a numeric value as percentage.

    Args:
        value: Numeric percentage (e.g., 50 for 50%)

    Returns:
        Formatted percentage string
    """
    if value is None:
        return ''

    try:
        num = float(value)
    except (ValueError, TypeError):
        return str(value)
    if not math.isfinite(num):
        return str(value)
    if num == int(num):
        return f'{int(num)}%'
    return f'{num:.2f}%'


def number_to_words(n: int) -> str:
    """
    Convert a number to English words (traditional drafting style).

    Args:
        n: Integer number

    Returns:
        Number in words
    """
    if n == 0:
        return 'zero'

    ones = ['', 'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine']
    teens = ['ten', 'eleven', 'twelve', 'thirteen', 'fourteen', 'fifteen',
             'sixteen', 'seventeen', 'eighteen', 'nineteen']
    tens = ['', '', 'twenty', 'thirty', 'forty', 'fifty', 'sixty', 'seventy', 'eighty', 'ninety']

    def convert_less_than_thousand(num):
        if num == 0:
            return ''
        elif num < 10:
            return ones[num]
        elif num < 20:
            return teens[num - 10]
        elif num < 100:
            return tens[num // 10] + ('' if num % 10 == 0 else '-' + ones[num % 10])
        else:
            return ones[num // 100] + ' hundred' + (
                '' if num % 100 == 0 else ' and ' + convert_less_than_thousand(num % 100)
            )

    if n < 1000:
        return convert_less_than_thousand(n)
    elif n < 1000000:
        thousands = n // 1000
        remainder = n % 1000
        result = convert_less_than_thousand(thousands) + ' thousand'
        if remainder > 0:
            result += ' ' + convert_less_than_thousand(remainder)
        return result
    else:
        return str(n)


def join_names(names: List[str], conjunction: str = 'and') -> str:
    """Join names as "A", "A and B" or "A, B and C"."""
    names = [n for n in names if n]
    if not names:
        return ''
    if len(names) == 1:
        return names[0]
    return f'{", ".join(names[:-1])} {conjunction} {names[-1]}'


def canonicalize_text(text: str) -> str:
    """
    Canonical form of document text used for checksums.

    Applies NFC normalization, converts line endings to "\\n", strips
    trailing whitespace on every line and trailing blank lines.
    """
    if not text:
        return ''
    normalized = unicodedata.normalize('NFC', text)
    normalized = normalized.replace('\r\n', '\n').replace('\r', '\n')
    normalized = TRAILING_WHITESPACE_PATTERN.sub('', normalized)
    return normalized.rstrip('\n')


def calculate_sha256(data: bytes) -> str:
    """
    Calculate SHA256 hash of data.

    Args:
        data: Bytes to hash

    Returns:
        Hexadecimal hash string
    """
    return hashlib.sha256(data).hexdigest()


def count_words(text: str) -> int:
    """Number of words in text."""
    if not text:
        return 0
    return len(WORD_PATTERN.findall(text))


def estimate_pages(word_count: int, words_per_page: int = WORDS_PER_PAGE) -> int:
    """Estimated printed page count, at least one page."""
    if word_count <= 0:
        return 1
    return max(1, -(-word_count // words_per_page))
