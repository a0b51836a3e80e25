"""Morse symbol tables, separators and shorthand maps.

All tables are read-only mappings (MappingProxyType) built once at import:
- Immutable (thread-safe, no mutation contract)
- Module-level (no per-call allocation)

Morse strings use ``.`` and ``-`` for elements and runs of spaces as
structural separators: three between letters, seven between words.

Usage:
    from dotdash.morse.tables import CHARACTERS, CHARACTER_DECODE

    CHARACTERS["A"]          # '.-'
    CHARACTER_DECODE[".-"]   # 'A'
"""

from collections.abc import Mapping
from types import MappingProxyType

LETTER_GAP = " " * 3
WORD_GAP = " " * 7

LETTERS: Mapping[str, str] = MappingProxyType(
    {
        "A": ".-",
        "B": "-...",
        "C": "-.-.",
        "D": "-..",
        "E": ".",
        "F": "..-.",
        "G": "--.",
        "H": "....",
        "I": "..",
        "J": ".---",
        "K": "-.-",
        "L": ".-..",
        "M": "--",
        "N": "-.",
        "O": "---",
        "P": ".--.",
        "Q": "--.-",
        "R": ".-.",
        "S": "...",
        "T": "-",
        "U": "..-",
        "V": "...-",
        "W": ".--",
        "X": "-..-",
        "Y": "-.--",
        "Z": "--..",
    }
)

DIGITS: Mapping[str, str] = MappingProxyType(
    {
        "0": "-----",
        "1": ".----",
        "2": "..---",
        "3": "...--",
        "4": "....-",
        "5": ".....",
        "6": "-....",
        "7": "--...",
        "8": "---..",
        "9": "----.",
    }
)

# "+" is absent: it shares .-.-. with the AR end-of-message prosign
PUNCTUATION: Mapping[str, str] = MappingProxyType(
    {
        ".": ".-.-.-",
        ",": "--..--",
        "?": "..--..",
        "'": ".----.",
        "!": "-.-.--",
        "/": "-..-.",
        "(": "-.--.",
        ")": "-.--.-",
        "&": ".-...",
        ":": "---...",
        ";": "-.-.-.",
        "=": "-...-",
        "-": "-....-",
        "_": "..--.-",
        '"': ".-..-.",
        "$": "...-..-",
        "@": ".--.-.",
    }
)

CHARACTERS: Mapping[str, str] = MappingProxyType({**LETTERS, **DIGITS, **PUNCTUATION})


def _invert(table: Mapping[str, str]) -> Mapping[str, str]:
    inverse: dict[str, str] = {}
    for char, code in table.items():
        if code in inverse:
            raise ValueError(f"{char!r} and {inverse[code]!r} share the code {code!r}")
        inverse[code] = char
    return MappingProxyType(inverse)


CHARACTER_DECODE: Mapping[str, str] = _invert(CHARACTERS)

# Prosigns written in text as !CODE, e.g. "!sos"
PROSIGNS: Mapping[str, str] = MappingProxyType(
    {
        "AA": ".-.-",
        "AR": ".-.-.",
        "BK": "-...-.-",
        "CL": "-.-..-..",
        "CT": "-.-.-",
        "DO": "-..---",
        "HH": "........",
        "SK": "...-.-",
        "SN": "...-.",
        "VE": "...-.",
        "SOS": "...---...",
    }
)

PROSIGN_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "AA": "New line",
        "AR": "End of message",
        "BK": "Break",
        "CL": "Closing",
        "CT": "Attention",
        "DO": "Shift to Wabun",
        "HH": "Error",
        "SK": "End of contact",
        "SN": "Understood",
        "VE": "Verified",
        "SOS": "Distress",
    }
)

# Prosigns whose code another prosign also uses; the named one decodes
_SHARED_CODE_WINNERS: Mapping[str, str] = MappingProxyType({"...-.": "VE"})

PROSIGN_DECODE: Mapping[str, str] = MappingProxyType(
    {
        code: PROSIGN_LABELS[_SHARED_CODE_WINNERS.get(code, name)]
        for name, code in PROSIGNS.items()
    }
)

NEW_LINE = PROSIGNS["AA"]
END_OF_MESSAGE = PROSIGNS["AR"]

# Splits a Morse message into lines
LINE_SEPARATOR = WORD_GAP + NEW_LINE


def prosign_marker(code: str) -> str:
    """Word that stands for a prosign between substitution and encoding."""
    return f"<{code}>"


PROSIGN_MARKERS: Mapping[str, str] = MappingProxyType(
    {prosign_marker(code): code for code in PROSIGNS}
)

# Applied in declaration order, phrases before Q-codes. Keys are lowercase
PHRASES: Mapping[str, str] = MappingProxyType(
    {
        "calling any station": "CQ",
        "love and kisses": "88",
        "best regards": "73",
        "good morning": "GM",
        "good afternoon": "GA",
        "good evening": "GE",
        "good night": "GN",
        "see you later": "CUL",
        "how are you": "HRU",
        "thank you": "TU",
        "thanks": "TNX",
        "please": "PSE",
    }
)

Q_CODES: Mapping[str, str] = MappingProxyType(
    {
        "what is your location": "QTH?",
        "my location is": "QTH",
        "who is calling me": "QRZ?",
        "is this frequency in use": "QRL?",
        "i acknowledge receipt": "QSL",
        "send more slowly": "QRS",
        "send faster": "QRQ",
        "stop sending": "QRT",
        "i am ready": "QRV",
        "change frequency": "QSY",
        "stand by": "QRX",
        "reduce power": "QRP",
        "increase power": "QRO",
        "interference": "QRM",
        "static noise": "QRN",
        "signals are fading": "QSB",
    }
)
