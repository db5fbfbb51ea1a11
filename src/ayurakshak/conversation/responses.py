"""Keyword classifier and canned reply templates.

This module hides the design decisions about:
- Which keywords trigger which reply
- The priority order in which rules are tried
- Reply wording, hotline numbers and outbound links

Matching is a case-insensitive substring test, not tokenized: "hot" also
matches "photo". The first rule that matches wins.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .models import Reply, Severity

EMERGENCY_NUMBER = "108"
HELPLINE_NUMBER = "104"

HOSPITAL_SEARCH_URL = "https://www.google.com/maps/search/hospital+near+me"
PHARMACY_SEARCH_URL = "https://www.google.com/maps/search/pharmacy+near+me"
CLINIC_SEARCH_URL = "https://www.google.com/maps/search/clinic+near+me"
GUIDELINES_URL = "https://www.who.int"

DISCLAIMER = "⚠️ Please consult a doctor before following this advice."

# Fever threshold and escalation windows quoted in the templates
FEVER_THRESHOLD = "101°F (38.3°C)"
FEVER_MAX_DAYS = 3
COUGH_MAX_WEEKS = 2


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    def predicate(text: str) -> bool:
        return any(keyword in text for keyword in keywords)
    return predicate


def _is_garlic_cure_claim(text: str) -> bool:
    return "garlic" in text and ("cure" in text or "treat" in text)


@dataclass(frozen=True)
class ResponseRule:
    """One entry of the priority list.

    Attributes:
        name: Rule identifier, reported on the Reply
        predicate: Called with the lowercased user text
        template: Reply body, formatted with ``message=<original text>``
        severity: Severity tag for the reply
    """

    name: str
    predicate: Callable[[str], bool]
    template: str
    severity: Severity

    def matches(self, text: str) -> bool:
        return self.predicate(text.lower())


EMERGENCY_TEMPLATE = f"""🚨 EMERGENCY DETECTED!

Immediate Actions:
📞 Call {EMERGENCY_NUMBER} (Emergency)
📞 Call {HELPLINE_NUMBER} (Health Helpline)
🏥 Visit nearest hospital

📍 Find hospitals near you: {HOSPITAL_SEARCH_URL}

⚠️ Please seek immediate medical attention."""

PAIN_TEMPLATE = f"""I understand you're experiencing pain. Here's what you can do:

💊 For mild pain:
• Rest the affected area
• Apply ice/heat as appropriate
• Take over-the-counter pain relief if suitable

📞 Call {HELPLINE_NUMBER} (Health Helpline) for guidance
🏥 If severe, visit: {HOSPITAL_SEARCH_URL}"""

FEVER_TEMPLATE = f"""For fever management:

🌡️ Monitor temperature regularly
💧 Stay hydrated - drink plenty of fluids
🛌 Get adequate rest
🍯 Consider lukewarm water with honey

⚠️ If fever >{FEVER_THRESHOLD} or persists >{FEVER_MAX_DAYS} days, consult a doctor immediately.

📞 Health Helpline: {HELPLINE_NUMBER}"""

MYTH_TEMPLATE = f"""⚠️ MYTH BUSTER ALERT!

Garlic does NOT cure serious diseases like TB, COVID, or cancer. While garlic has some health benefits, it cannot replace proper medical treatment.

📚 Official guidelines: {GUIDELINES_URL}
💊 Always follow prescribed medications
👨‍⚕️ Consult healthcare professionals"""

COUGH_TEMPLATE = f"""For cough and cold relief:

🍵 Warm liquids (herbal tea, warm water)
🍯 Honey with lukewarm water
💨 Steam inhalation
🛌 Adequate rest
😷 Wear mask to prevent spread

⚠️ If cough persists >{COUGH_MAX_WEEKS} weeks or has blood, see a doctor immediately.

📞 Health Helpline: {HELPLINE_NUMBER}"""

FALLBACK_TEMPLATE = """Thank you for your message: "{message}"

I'm here to help with health-related questions. You can ask me about:

🤒 Common symptoms (fever, cough, pain)
💊 General health advice
🚨 Emergency guidance
🏥 Finding nearby hospitals

What specific health concern can I help you with?"""

FILE_RECEIVED_TEMPLATE = """I received your file: "{file_name}". I can help analyze medical reports and prescriptions.

📋 For prescription analysis, I can explain:
• Dosage instructions
• Medicine timing
• Possible side effects

📊 For lab reports, I can help interpret basic values."""

LOCATION_TEMPLATE = f"""📍 Location received!

Finding nearby healthcare facilities:
🏥 Hospitals: {HOSPITAL_SEARCH_URL}
💊 Pharmacies: {PHARMACY_SEARCH_URL}
🩺 Clinics: {CLINIC_SEARCH_URL}

📞 Emergency: {EMERGENCY_NUMBER}
📞 Health Helpline: {HELPLINE_NUMBER}"""

GREETING = """🙏 Welcome to AYURAKSHAK! I'm your AI health assistant. How can I help you today?

⚠️ Remember: I provide general health information only. Please consult a doctor for proper medical advice."""


# Order is significant: earlier rules shadow later ones.
RULES: tuple[ResponseRule, ...] = (
    ResponseRule(
        name="emergency",
        predicate=_contains_any("sos", "😭", "emergency", "help me"),
        template=EMERGENCY_TEMPLATE,
        severity=Severity.EMERGENCY,
    ),
    ResponseRule(
        name="pain",
        predicate=_contains_any("pain", "दर्द", "ache", "hurt"),
        template=PAIN_TEMPLATE,
        severity=Severity.WARNING,
    ),
    ResponseRule(
        name="fever",
        predicate=_contains_any("fever", "बुखार", "temperature", "hot"),
        template=FEVER_TEMPLATE,
        severity=Severity.NORMAL,
    ),
    ResponseRule(
        name="myth",
        predicate=_is_garlic_cure_claim,
        template=MYTH_TEMPLATE,
        severity=Severity.WARNING,
    ),
    ResponseRule(
        name="cough",
        predicate=_contains_any("cough", "खांसी", "cold"),
        template=COUGH_TEMPLATE,
        severity=Severity.NORMAL,
    ),
)

FALLBACK_RULE = ResponseRule(
    name="fallback",
    predicate=lambda text: True,
    template=FALLBACK_TEMPLATE,
    severity=Severity.NORMAL,
)


def with_disclaimer(body: str) -> str:
    """Append the consultation disclaimer as the final line."""
    return f"{body}\n\n{DISCLAIMER}"


def match_rule(text: str) -> ResponseRule:
    """Return the first rule whose keywords occur in text."""
    for rule in RULES:
        if rule.matches(text):
            return rule
    return FALLBACK_RULE


def classify(text: str) -> Reply:
    """Map raw user text to a canned reply and severity.

    Pure function of its input. The disclaimer is added here rather than
    in the templates, so every path ends with it.
    """
    rule = match_rule(text)
    body = rule.template.replace("{message}", text)
    return Reply(text=with_disclaimer(body), severity=rule.severity, rule=rule.name)


def file_received_reply(file_name: str) -> Reply:
    """Acknowledgment for an attached file. File contents are never read."""
    body = FILE_RECEIVED_TEMPLATE.replace("{file_name}", file_name)
    return Reply(text=with_disclaimer(body), rule="file")


def location_reply() -> Reply:
    """Static nearby-facility links sent after a location fix."""
    return Reply(text=with_disclaimer(LOCATION_TEMPLATE), rule="location")


def greeting() -> Reply:
    """Opening message of every session."""
    return Reply(text=GREETING, rule="greeting")
