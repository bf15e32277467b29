# ============================================================================
# src/appointment_extraction/constants/patterns.py
# ============================================================================
"""
Field Pattern Sources

Ordered regular-expression sources for the field extractors. They are
compiled once (case-insensitive) when the lexicon is built; list order is
the matching order.

Parametric patterns accept spoken number words as well as digits since
speech-to-text usually writes "seven days" rather than "7 days".
"""

NUMBER = (
    r"(?:\d+|one|two|three|four|five|six|seven|eight|nine|ten"
    r"|eleven|twelve|fourteen|twenty|thirty)"
)

# No trailing boundary: "5 mls" and "250mgs" still yield "5 ml" and "250mg"
DOSAGE_PATTERN = (
    r"(\d+(?:\.\d+)?)\s*"
    r"(mg|milligrams?|mcg|micrograms?|ml|millilitres?|tablets?|pills?|capsules?)"
)

# Fixed phrases first, then the parametric "every N hours" forms
FREQUENCY_PATTERNS = (
    r"\bonce a day\b", r"\btwice a day\b", r"\bthree times a day\b", r"\bfour times a day\b",
    r"\bonce daily\b", r"\btwice daily\b", r"\bthree times daily\b",
    r"\bevery morning\b", r"\bevery evening\b", r"\bevery night\b",
    r"\bat night\b", r"\bat bedtime\b",
    r"\bin the morning\b", r"\bin the evening\b",
    r"\bwith breakfast\b", r"\bwith lunch\b", r"\bwith dinner\b",
    r"\bwith food\b", r"\bwith meals\b", r"\bafter food\b", r"\bbefore food\b",
    r"\bon an empty stomach\b",
    r"\bas needed\b", r"\bwhen needed\b", r"\bwhen required\b", r"\bas required\b",
    r"\bprn\b",
    rf"\bevery {NUMBER} to {NUMBER} hours?\b",
    rf"\bevery {NUMBER} hours?\b",
)

DURATION_PATTERNS = (
    rf"\bfor {NUMBER} days?\b", rf"\bfor {NUMBER} weeks?\b", rf"\bfor {NUMBER} months?\b",
    r"\bfor a week\b", r"\bfor two weeks\b", r"\bfor a month\b",
    r"\buntil finished\b", r"\buntil gone\b", r"\buntil the course is complete\b",
    r"\buntil you feel better\b", r"\buntil symptoms improve\b",
    r"\blong term\b", r"\bongoing\b", r"\bindefinitely\b", r"\bpermanently\b",
)

# Every pattern is tried; the LAST one that matches supplies the timeframe
TIMEFRAME_PATTERNS = (
    rf"\bin {NUMBER} days?\b", rf"\bin {NUMBER} weeks?\b", rf"\bin {NUMBER} months?\b",
    r"\bin a week\b", r"\bin two weeks\b", r"\bin a month\b", r"\bin a fortnight\b",
    r"\bnext week\b", r"\bnext month\b",
    rf"\bafter {NUMBER} days?\b", rf"\bafter {NUMBER} weeks?\b",
)
