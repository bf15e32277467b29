# ============================================================================
# src/appointment_extraction/constants/medication_gazetteer.py
# ============================================================================
"""
Medication Gazetteer

Fixed list of medication names commonly prescribed in Irish general
practice. Lookup is gazetteer-driven: a medication is only ever reported
under one of these names, never under a freeform string from the
transcript.

Iteration order matters. The matcher returns the first entry that
matches, so more specific names ("canesten cream") must precede the
names they contain ("canesten").
"""

COMMON_MEDICATIONS = (
    # Pain relief
    "paracetamol", "ibuprofen", "aspirin", "codeine", "tramadol",
    "co-codamol", "solpadol", "difene", "diclofenac", "naproxen",
    "ponstan", "mefenamic acid", "co-dydramol", "nurofen",

    # Antibiotics
    "amoxicillin", "augmentin", "co-amoxiclav", "flucloxacillin",
    "doxycycline", "clarithromycin", "azithromycin", "metronidazole",
    "trimethoprim", "nitrofurantoin", "ciprofloxacin", "penicillin",

    # Stomach/acid/nausea
    "omeprazole", "lansoprazole", "esomeprazole", "pantoprazole",
    "domperidone", "motilium", "gaviscon", "buscopan",
    "cyclizine", "prochlorperazine", "stemetil", "ondansetron",

    # Diabetes
    "metformin", "gliclazide", "insulin", "sitagliptin", "empagliflozin",

    # Blood pressure/heart
    "lisinopril", "ramipril", "perindopril", "amlodipine",
    "bisoprolol", "atenolol", "diltiazem", "verapamil",
    "losartan", "candesartan", "furosemide", "bendroflumethiazide",

    # Cholesterol
    "atorvastatin", "rosuvastatin", "simvastatin", "pravastatin",

    # Mental health
    "sertraline", "escitalopram", "citalopram", "fluoxetine",
    "venlafaxine", "mirtazapine", "duloxetine", "amitriptyline",

    # Respiratory
    "salbutamol", "ventolin", "beclometasone", "seretide", "symbicort",
    "montelukast", "prednisolone", "prednisone",

    # Thyroid
    "levothyroxine", "eltroxin", "thyroxine",

    # Blood thinners
    "warfarin", "apixaban", "rivaroxaban", "dabigatran", "clopidogrel",

    # Nerve pain/epilepsy
    "gabapentin", "pregabalin", "carbamazepine",

    # Sedatives/anxiety
    "diazepam", "alprazolam", "zopiclone", "lorazepam",

    # Allergies/antihistamines
    "cetirizine", "loratadine", "fexofenadine", "piriton", "chlorphenamine",
    "beconase", "avamys", "nasonex", "dymista",

    # Skin conditions
    "hydrocortisone", "betnovate", "eumovate", "dermovate", "elocon",
    "fucidin", "fusidic acid", "fucibet", "daktacort",
    "daktarin", "canesten cream", "lamisil",
    "diprobase", "epaderm", "dermol", "doublebase", "cetraben",
    "duac", "differin", "epiduo", "zineryt",

    # Eye/ear
    "chloramphenicol", "fucithalmic", "maxitrol",
    "otomize", "sofradex", "locorten vioform",
    "hypromellose", "hylo-tear",

    # Gout
    "allopurinol", "colchicine", "febuxostat",

    # Men's health/prostate
    "tamsulosin", "alfuzosin", "finasteride", "dutasteride",
    "sildenafil", "tadalafil",

    # Viral infections
    "aciclovir", "valaciclovir",

    # Women's health
    "microgynon", "cilest", "yasmin", "dianette", "cerazette", "noriday",
    "mirena", "kyleena", "jaydess", "copper coil",
    "norethisterone", "provera", "tranexamic acid",
    "evorel", "estradot", "elleste", "femoston", "kliovance", "oestrogel",
    "vagifem", "ovestin",
    "clomid", "clomiphene",
    "fluconazole", "canesten",

    # Supplements
    "folic acid", "vitamin d", "desunin", "iron", "ferrous fumarate",
    "ferrous sulfate", "calcichew", "adcal",
)


# Speech-to-text renderings of medication names seen in real recordings
# (misspelling -> gazetteer entry). Checked before the similarity score.
KNOWN_MISSPELLINGS = (
    ("moxosilin", "amoxicillin"),
    ("moxocillin", "amoxicillin"),
    ("a moxosilin", "amoxicillin"),
    ("a moxocillin", "amoxicillin"),
    ("a moxicillin", "amoxicillin"),
    ("moxicillin", "amoxicillin"),
    ("amoxacillin", "amoxicillin"),
    ("amoxocillin", "amoxicillin"),
    ("amoxosilin", "amoxicillin"),
)
