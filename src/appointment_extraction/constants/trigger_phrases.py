# ============================================================================
# src/appointment_extraction/constants/trigger_phrases.py
# ============================================================================
"""
Trigger Phrase Tables

Keyword lists whose presence in a sentence signals that an extraction
category should be attempted on it. All entries are lowercase and are
matched as plain substrings of the lowercased sentence.

The lists are frozen: adding a phrase changes what gets extracted from
every transcript, so changes need clinical review.
"""

MEDICATION_TRIGGERS = (
    "take", "taking", "prescribe", "prescribed", "prescribing",
    "start", "starting", "begin", "beginning",
    "continue", "continuing", "keep taking",
    "medication", "medicine", "tablet", "tablets", "pill", "pills",
    "capsule", "capsules", "dose", "dosage",
    "milligrams", "mg", "micrograms", "mcg", "millilitres", "ml",
)

# First hit (in this order) becomes the TestOrReferral type
TEST_REFERRAL_TRIGGERS = (
    "blood test", "blood tests", "bloods",
    "x-ray", "xray", "scan", "ct scan", "mri", "ultrasound",
    "ecg", "ekg", "echocardiogram",
    "urine test", "urine sample", "stool sample",
    "biopsy", "endoscopy", "colonoscopy",
    "refer", "referral", "referring", "specialist",
    "hospital", "clinic", "consultant",
)

URGENCY_INDICATORS = (
    "urgent", "urgently", "as soon as possible", "asap",
    "immediately", "straight away", "right away",
    "today", "tomorrow", "this week",
    "priority", "fast track", "two week wait",
)

FOLLOW_UP_TRIGGERS = (
    "come back", "see you", "follow up", "follow-up", "followup",
    "book", "appointment", "review",
    "check", "check-up", "checkup",
    "return", "revisit",
)

# (keywords, reported label) - first group with any keyword present wins
FOLLOW_UP_LOCATIONS = (
    (("reception",), "reception"),
    (("online",), "online"),
    (("phone", "call"), "phone"),
    (("gp", "surgery"), "GP surgery"),
)

SAFETY_TRIGGERS = (
    "if you", "should you", "in case",
    "watch out for", "look out for", "be aware",
    "warning sign", "red flag",
    "go to a&e", "go to hospital", "call 999", "call an ambulance",
    "emergency", "seek help", "get help",
    "don't", "do not", "avoid", "stop taking if",
    "allergic", "reaction", "side effect",
)

SAFETY_CONDITIONS = (
    "fever", "temperature", "breathing", "breathless",
    "chest pain", "severe pain", "worse", "worsens",
    "bleeding", "blood", "swelling", "swollen",
    "rash", "hives", "dizzy", "faint", "collapse",
    "vomiting", "diarrhoea", "diarrhea",
    "confused", "confusion", "drowsy",
)

# Sufficient on their own to make a sentence a safety warning
EMERGENCY_KEYWORDS = ("a&e", "999", "emergency", "ambulance")

SPECIAL_INSTRUCTIONS = (
    "with food", "with meals", "after food", "before food",
    "on an empty stomach", "with water", "with plenty of water",
    "do not crush", "do not chew", "swallow whole",
)

LIFESTYLE_KEYWORDS = (
    "exercise", "walk", "walking", "activity",
    "diet", "eat", "eating", "food", "drink", "water", "alcohol",
    "sleep", "rest", "relax",
    "stress", "work", "smoking", "smoke", "quit",
)

REASSURANCE_PHRASES = (
    "nothing to worry", "don't worry", "not serious",
    "common", "normal", "expected", "should improve",
    "good news", "looking good",
)
