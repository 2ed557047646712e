"""
Industry categories, the static seed table and industry-name normalisation.

Seed style scores are on the wide scale, like every persisted aggregate row.
"""

from typing import Final

from style_engine.models.axes import AXIS_KEYS, complete_vector
from style_engine.models.industry import IndustryDefaults

INDUSTRY_CATEGORIES: Final[tuple[str, ...]] = (
    "restaurant",
    "tech_startup",
    "fashion",
    "healthcare",
    "real_estate",
    "consulting",
    "education",
    "fitness",
    "beauty",
    "finance",
    "nonprofit",
    "creative_agency",
    "retail",
    "manufacturing",
    "legal",
    "other",
)

FALLBACK_INDUSTRY: Final[str] = "other"
FALLBACK_CONFIDENCE: Final[float] = 0.3
DEFAULT_BUDGET: Final[str] = "$5,000-$15,000"
DEFAULT_TIMELINE: Final[str] = "4-6 weeks"


def _seed(
    scores: tuple[float, ...],
    styles: tuple[str, ...],
    colors: tuple[str, ...],
    typography: tuple[str, ...],
    budget: str,
    timeline: str,
) -> dict:
    return {
        "style_scores": dict(zip(AXIS_KEYS, scores)),
        "common_styles": list(styles),
        "preferred_colors": list(colors),
        "common_typography": list(typography),
        "average_budget": budget,
        "average_timeline": timeline,
    }


# Columns follow AXIS_KEYS; luxury_accessible values are set per industry
# fmt: off
SEED_DEFAULTS: Final[dict[str, dict]] = {
    "restaurant": _seed(
        (-5, -10, 15, -5, 10, -8, 0),
        ("organic", "warm", "playful"),
        ("warm earth tones", "inviting oranges", "natural greens"),
        ("handwritten", "serif"),
        "$5,000-$15,000", "4-6 weeks",
    ),
    "tech_startup": _seed(
        (20, 10, -5, 15, 5, 10, 3),
        ("modern", "minimal", "bold"),
        ("tech blues", "clean whites", "electric accents"),
        ("sans-serif", "geometric"),
        "$10,000-$25,000", "6-8 weeks",
    ),
    "fashion": _seed(
        (5, 15, 10, -10, 8, -5, 12),
        ("bold", "elegant", "modern"),
        ("black & white", "rich jewel tones", "soft pastels"),
        ("elegant serif", "modern sans-serif"),
        "$8,000-$20,000", "5-7 weeks",
    ),
    "healthcare": _seed(
        (10, -15, 8, 10, -15, 5, -5),
        ("clean", "trustworthy", "professional"),
        ("calming blues", "medical greens", "clean whites"),
        ("clean sans-serif", "readable fonts"),
        "$7,000-$18,000", "5-7 weeks",
    ),
    "real_estate": _seed(
        (8, 5, 12, 8, -8, -3, 10),
        ("professional", "trustworthy", "warm"),
        ("warm grays", "trust blues", "gold accents"),
        ("professional serif", "clean sans-serif"),
        "$6,000-$15,000", "4-6 weeks",
    ),
    "consulting": _seed(
        (12, -8, -5, 15, -18, 8, 5),
        ("professional", "minimal", "modern"),
        ("corporate blues", "sophisticated grays", "accent colors"),
        ("professional sans-serif", "clean fonts"),
        "$8,000-$20,000", "6-8 weeks",
    ),
    "education": _seed(
        (5, -5, 15, 0, 12, -5, -10),
        ("approachable", "warm", "friendly"),
        ("educational blues", "warm oranges", "friendly greens"),
        ("readable fonts", "friendly sans-serif"),
        "$4,000-$12,000", "4-6 weeks",
    ),
    "fitness": _seed(
        (10, 18, 8, 5, 10, -3, 0),
        ("energetic", "bold", "modern"),
        ("energetic reds", "vibrant oranges", "fitness greens"),
        ("strong fonts", "athletic styling"),
        "$5,000-$15,000", "4-6 weeks",
    ),
    "beauty": _seed(
        (8, 5, 12, -8, 5, -8, 10),
        ("elegant", "refined", "feminine"),
        ("soft pinks", "elegant golds", "natural tones"),
        ("elegant fonts", "refined styling"),
        "$6,000-$16,000", "5-7 weeks",
    ),
    "finance": _seed(
        (5, -12, -10, 18, -20, 10, 8),
        ("professional", "trustworthy", "minimal"),
        ("trust blues", "sophisticated grays", "gold accents"),
        ("professional fonts", "clean styling"),
        "$10,000-$25,000", "6-10 weeks",
    ),
    "nonprofit": _seed(
        (0, -5, 18, 5, 5, -5, -12),
        ("warm", "trustworthy", "approachable"),
        ("hope blues", "caring greens", "warm earth tones"),
        ("approachable fonts", "readable styling"),
        "$3,000-$10,000", "4-6 weeks",
    ),
    "creative_agency": _seed(
        (15, 20, 5, -10, 15, 5, 0),
        ("creative", "bold", "unique"),
        ("creative palettes", "bold accents", "artistic colors"),
        ("creative fonts", "unique styling"),
        "$8,000-$20,000", "5-8 weeks",
    ),
    "retail": _seed(
        (8, 12, 10, -5, 8, -3, 0),
        ("approachable", "modern", "inviting"),
        ("brand colors", "seasonal palettes", "retail-friendly"),
        ("readable fonts", "brand-focused"),
        "$6,000-$18,000", "5-7 weeks",
    ),
    "manufacturing": _seed(
        (5, 8, -5, 12, -15, 8, 0),
        ("industrial", "professional", "strong"),
        ("industrial blues", "steel grays", "safety colors"),
        ("industrial fonts", "strong styling"),
        "$8,000-$20,000", "6-8 weeks",
    ),
    "legal": _seed(
        (-5, -15, -8, 15, -25, 5, 8),
        ("traditional", "trustworthy", "professional"),
        ("traditional blues", "professional grays", "gold accents"),
        ("traditional serif", "professional fonts"),
        "$8,000-$22,000", "6-10 weeks",
    ),
    "other": _seed(
        (0, 0, 0, 0, 0, 0, 0),
        ("versatile", "adaptable"),
        ("neutral palette", "brand colors"),
        ("versatile fonts",),
        DEFAULT_BUDGET, DEFAULT_TIMELINE,
    ),
}
# fmt: on

# Substring → category, checked in order; the first hit wins.
# Specific words sit before shorter words found inside them ("apparel" before "app",
# "architecture" before "tech").
INDUSTRY_KEYWORDS: Final[tuple[tuple[str, str], ...]] = (
    # Fashion
    ("apparel", "fashion"),
    ("clothing", "fashion"),
    ("fashion", "fashion"),
    ("jewelry", "fashion"),
    ("accessories", "fashion"),
    # Restaurant / food
    ("food", "restaurant"),
    ("restaurant", "restaurant"),
    ("cafe", "restaurant"),
    ("coffee", "restaurant"),
    ("bakery", "restaurant"),
    ("catering", "restaurant"),
    ("hospitality", "restaurant"),
    # Real estate
    ("real estate", "real_estate"),
    ("property", "real_estate"),
    ("realtor", "real_estate"),
    ("construction", "real_estate"),
    ("architecture", "real_estate"),
    # Tech
    ("technology", "tech_startup"),
    ("software", "tech_startup"),
    ("saas", "tech_startup"),
    ("startup", "tech_startup"),
    ("tech", "tech_startup"),
    ("app", "tech_startup"),
    # Fitness
    ("fitness", "fitness"),
    ("gym", "fitness"),
    ("yoga", "fitness"),
    ("athletic", "fitness"),
    # Healthcare
    ("medical", "healthcare"),
    ("dental", "healthcare"),
    ("health", "healthcare"),
    ("therapy", "healthcare"),
    ("clinic", "healthcare"),
    # Education
    ("education", "education"),
    ("school", "education"),
    ("tutor", "education"),
    ("university", "education"),
    ("course", "education"),
    # Nonprofit
    ("nonprofit", "nonprofit"),
    ("non-profit", "nonprofit"),
    ("charity", "nonprofit"),
    ("foundation", "nonprofit"),
    # Creative agency
    ("agency", "creative_agency"),
    ("studio", "creative_agency"),
    ("creative", "creative_agency"),
    # Beauty
    ("cosmetics", "beauty"),
    ("skincare", "beauty"),
    ("beauty", "beauty"),
    ("salon", "beauty"),
    ("spa", "beauty"),
    ("wellness", "beauty"),
    # Finance
    ("financial", "finance"),
    ("finance", "finance"),
    ("banking", "finance"),
    ("investment", "finance"),
    ("accounting", "finance"),
    ("insurance", "finance"),
    # Legal
    ("law", "legal"),
    ("attorney", "legal"),
    ("lawyer", "legal"),
    ("litigation", "legal"),
    ("legal", "legal"),
    # Retail
    ("retail", "retail"),
    ("shop", "retail"),
    ("store", "retail"),
    ("ecommerce", "retail"),
    ("e-commerce", "retail"),
    # Manufacturing
    ("manufactur", "manufacturing"),
    ("industrial", "manufacturing"),
    ("factory", "manufacturing"),
    # Consulting
    ("consult", "consulting"),
    ("business", "consulting"),
    ("strategy", "consulting"),
    ("management", "consulting"),
    ("advisory", "consulting"),
)


def normalize_industry(industry: str | None) -> str:
    """
    Map free-text industry input onto the fixed category set.

    Exact match first (case, surrounding whitespace, spaces and hyphens are
    ignored), then the first keyword contained in the text, else "other".

    Args:
        industry: Whatever the designer typed, e.g. "Dental Clinic"

    Returns:
        One of INDUSTRY_CATEGORIES
    """
    if not industry:
        return FALLBACK_INDUSTRY
    text = industry.lower().strip()
    key = text.replace(" ", "_").replace("-", "_")
    if key in INDUSTRY_CATEGORIES:
        return key
    for keyword, category in INDUSTRY_KEYWORDS:
        if keyword in text:
            return category
    return FALLBACK_INDUSTRY


def fallback_defaults(industry: str) -> IndustryDefaults:
    """Static row for an industry with no aggregate yet."""
    category = normalize_industry(industry)
    seed = SEED_DEFAULTS.get(category, SEED_DEFAULTS[FALLBACK_INDUSTRY])
    return IndustryDefaults(
        industry=category,
        sample_size=0,
        style_scores=complete_vector(seed["style_scores"]),
        common_styles=list(seed["common_styles"]),
        preferred_colors=list(seed["preferred_colors"]),
        common_typography=list(seed["common_typography"]),
        average_budget=seed["average_budget"] or DEFAULT_BUDGET,
        average_timeline=seed["average_timeline"] or DEFAULT_TIMELINE,
        confidence_level=FALLBACK_CONFIDENCE,
    )
