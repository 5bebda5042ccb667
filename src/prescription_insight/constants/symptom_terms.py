# ============================================================================
# src/prescription_insight/constants/symptom_terms.py
# ============================================================================
"""
Symptom Vocabulary
- Keywords matched by containment against prescription text
- Label phrases that introduce free-text complaints/diagnoses
- Term groups the diagnosis symptom pass looks for
"""

# Order matters: matched keywords are reported in this order.
SYMPTOM_KEYWORDS = (
    # General / infectious
    "fever", "headache", "cough", "cold", "sore throat", "infection",
    "body ache", "fatigue", "weakness", "dizziness",
    # Cardiovascular
    "blood pressure", "hypertension", "chest pain", "palpitations",
    "cholesterol", "breathlessness",
    # Metabolic / endocrine
    "diabetes", "blood sugar", "high sugar", "thyroid", "weight gain",
    "weight loss", "excessive thirst",
    # Musculoskeletal
    "pain", "joint pain", "back pain", "arthritis", "inflammation",
    "swelling", "muscle pain", "sprain",
    # Psychiatric
    "depression", "anxiety", "insomnia", "stress", "panic",
    # Gastrointestinal
    "stomach pain", "acidity", "gastritis", "heartburn", "reflux", "nausea",
    "vomiting", "diarrhea", "constipation", "indigestion", "bloating",
    # Dermatologic
    "rash", "itching", "eczema", "acne", "allergy", "skin infection",
)

# (label pattern, description). Each pattern is followed by a captured phrase.
SYMPTOM_LABEL_PATTERNS = (
    (r'\b(?:diagnosis|dx)\s*[:\-]', "diagnosis label"),
    (r'\b(?:chief\s+complaint|condition)\s*[:\-]', "condition label"),
    (r'\b(?:presenting\s+with|symptoms\s+include)\s*:?', "presentation label"),
    (r'\b(?:complaint|problem)\s*[:\-]', "complaint label"),
)

DEFAULT_SYMPTOM = "General health maintenance"

DIABETES_TERMS = ("diabetes", "diabetic", "blood sugar", "high sugar", "glucose", "hyperglycemia")

HYPERTENSION_TERMS = ("hypertension", "blood pressure", "high bp")
