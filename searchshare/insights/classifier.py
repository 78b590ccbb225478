"""
Keyword Classifier

Assigns a topical category and a branded flag to every ranked keyword.

Categories come from an ordered list of (label, predicate) rules evaluated
top to bottom; the first matching rule wins and keywords matching nothing
fall into "Uncategorized". More specific rules (e.g. "Winter Tires") must
therefore be listed before their generic parents ("Tires").

A keyword is branded when its normalized text contains the tracked brand
name or one of its aliases, so "Dr. Hauschka Creme" matches "dr hauschka".

Search intent (and from it the funnel stage) uses the same ordered-rule
evaluation over modifier patterns such as "kaufen", "vergleich" or "login".
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from ..models import FunnelStage, RankedKeywordRecord, SearchIntent
from ..utils.text import contains_any

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class CategoryRule:
    """A category label and the predicate deciding membership."""
    label: str
    predicate: Callable[[str], bool]

    def matches(self, keyword: str) -> bool:
        return self.predicate(keyword)


def regex_rule(label: str, pattern: str) -> CategoryRule:
    """Build a case-insensitive regex rule."""
    compiled = re.compile(pattern, re.IGNORECASE)
    return CategoryRule(label=label, predicate=lambda text: compiled.search(text) is not None)


# =============================================================================
# DEFAULT RULESET
# =============================================================================

DEFAULT_CATEGORY_RULES: List[CategoryRule] = [
    # Automotive / Tires (specific first)
    regex_rule("Winter Tires", r"winter.?reifen|winter.?tire|winter.?tyre|schnee.?reifen|snow.?tire"),
    regex_rule("Summer Tires", r"sommer.?reifen|summer.?tire|summer.?tyre"),
    regex_rule("All-Season Tires", r"allwetter|ganzjahres|all.?season|4.?season"),
    regex_rule("SUV/Truck Tires", r"suv.?reifen|suv.?tire|truck.?tire|geländewagen|offroad"),
    regex_rule("Performance Tires", r"sport.?reifen|performance|uhp|ultra.?high|racing"),
    regex_rule("Tires", r"\breifen\b|\btires?\b|\btyres?\b|pneu|pneumatic"),
    regex_rule("Wheels & Rims", r"felge|rim\b|wheel\b|alufelge|alloy"),
    regex_rule("Tire Services", r"reifenwechsel|tire.?change|mounting|balancing|rotation"),
    regex_rule("Automotive", r"\bauto\b|\bcar\b|fahrzeug|vehicle|kfz|pkw"),

    # Beauty & Personal Care
    regex_rule("Anti-Aging", r"anti.?age|anti.?aging|anti.?falten|wrinkle|retinol|collagen"),
    regex_rule("Skincare", r"skincare|skin.?care|hautpflege|face.?cream|gesichtscreme|serum|moistur|cleanser"),
    regex_rule("Makeup", r"makeup|make-up|lipstick|mascara|foundation|eyeshadow|lippenstift|rouge|blush|concealer"),
    regex_rule("Hair Care", r"hair.?care|haarpflege|shampoo|conditioner|spülung|haarkur"),
    regex_rule("Body Care", r"body.?care|körperpflege|body.?lotion|duschgel|shower|bodywash"),
    regex_rule("Natural Cosmetics", r"natural.?cosmetic|natur.?kosmetik|bio.?cosmetic|organic.?beauty"),
    regex_rule("Fragrances", r"perfume|parfum|fragrance|duft|eau.?de|cologne"),
    regex_rule("Sun Care", r"sun.?care|sonnenschutz|sunscreen|spf|uv.?schutz|sonnencreme"),

    # Sports & Athletic
    regex_rule("Running", r"running|laufschuh|jogging|marathon|trail.?run"),
    regex_rule("Football/Soccer", r"football|fußball|soccer|fussball"),
    regex_rule("Training", r"training|workout|fitness|gym\b|exercise"),
    regex_rule("Sneakers", r"sneaker|sportschuh|trainer\b|athletic.?shoe"),
    regex_rule("Outdoor", r"outdoor|hiking|wandern|camping|trekking"),
    regex_rule("Cycling", r"cycling|fahrrad|bike|bicycle|radfahren"),

    # Fashion
    regex_rule("Apparel", r"\bshirt\b|hoodie|jacket|jacke|pants|hose|shorts|dress|kleid"),
    regex_rule("Footwear", r"\bshoes?\b|schuh|boots|stiefel|sandal"),
    regex_rule("Accessories", r"accessory|accessories|\bbag\b|tasche|wallet|belt|gürtel|\bhat\b|mütze"),

    # Technology
    regex_rule("Smartphones", r"smartphone|iphone|samsung.?galaxy|mobile.?phone|handy"),
    regex_rule("Laptops", r"laptop|notebook|macbook|computer"),
    regex_rule("Audio", r"headphone|kopfhörer|speaker|lautsprecher|earbuds|audio"),
    regex_rule("Smart Home", r"smart.?home|alexa|google.?home|\biot\b|connected"),

    # Sustainability
    regex_rule("Eco-Friendly", r"eco.?friendly|öko|nachhaltig|sustainab|umweltfreundlich|green"),
    regex_rule("Vegan", r"\bvegan|tierversuchsfrei|cruelty.?free|plant.?based"),

    # Services
    regex_rule("Dealer Locator", r"händler|dealer|store.?locator|find.?a.?store|standort"),
    regex_rule("Contact", r"kontakt|contact|customer.?service|kundenservice|support"),
    regex_rule("Warranty", r"garantie|warranty|gewährleistung"),
]


# =============================================================================
# SEARCH INTENT
# =============================================================================

# Same first-match-wins evaluation as the category rules; labels are
# SearchIntent values. Purchase modifiers beat comparison modifiers, so
# "best price" is transactional.
DEFAULT_INTENT_RULES: List[CategoryRule] = [
    # Transactional
    regex_rule("transactional", r"\b(buy|purchase|order|shop|deal|discount|coupon|price|cheap|affordable|sale|offer)\b"),
    regex_rule("transactional", r"\b(near me|delivery|shipping|store|outlet)\b"),
    regex_rule("transactional", r"\b(online|subscribe|download|get|hire)\b"),
    regex_rule("transactional", r"\b(kaufen|bestellen|günstig|preis|preise|angebot|rabatt|gutschein)\b"),

    # Commercial
    regex_rule("commercial", r"\b(best|top|review|compare|comparison|vs|versus|alternative)\b"),
    regex_rule("commercial", r"\b(recommended|rating|rated|guide|tips)\b"),
    regex_rule("commercial", r"\b(pros|cons|features|benefits|worth)\b"),
    regex_rule("commercial", r"\b(beste|besten|test|testsieger|vergleich|erfahrungen|bewertung|marken)\b"),

    # Navigational
    regex_rule("navigational", r"\b(login|signin|sign in|account|portal|dashboard)\b"),
    regex_rule("navigational", r"\b(contact|support|help|customer service)\b"),
    regex_rule("navigational", r"\b(official|website|site|app)\b"),
    regex_rule("navigational", r"\b(anmelden|konto|kontakt|kundenservice|hilfe|offizielle?)\b"),

    # Informational
    regex_rule("informational", r"\b(how|what|why|when|where|who|which|can|does|is|are)\b"),
    regex_rule("informational", r"\b(tutorial|learn|example|definition|meaning)\b"),
    regex_rule("informational", r"\b(ideas|ways|steps|process)\b"),
    regex_rule("informational", r"\b(wie|was|warum|wann|wo|welche|anleitung|rezept)\b"),

    # Product-like keywords without a modifier
    regex_rule("commercial", r"\b(product|service|solution|software|tool|system|platform)\b"),
]

INTENT_TO_FUNNEL = {
    SearchIntent.INFORMATIONAL: FunnelStage.AWARENESS,
    SearchIntent.COMMERCIAL: FunnelStage.CONSIDERATION,
    SearchIntent.TRANSACTIONAL: FunnelStage.DECISION,
    SearchIntent.NAVIGATIONAL: FunnelStage.RETENTION,
}


def classify_intent(
    keyword: str,
    rules: Sequence[CategoryRule] = DEFAULT_INTENT_RULES,
) -> SearchIntent:
    """Search intent of a keyword; informational when no modifier matches."""
    return SearchIntent(detect_category(keyword, rules, default=SearchIntent.INFORMATIONAL.value))


def get_funnel_stage(
    keyword: str,
    rules: Sequence[CategoryRule] = DEFAULT_INTENT_RULES,
) -> FunnelStage:
    """Funnel stage implied by the keyword's intent."""
    return INTENT_TO_FUNNEL[classify_intent(keyword, rules)]


def detect_category(
    keyword: str,
    rules: Sequence[CategoryRule] = DEFAULT_CATEGORY_RULES,
    default: str = UNCATEGORIZED,
) -> str:
    """
    Return the label of the first rule matching ``keyword``.

    Args:
        keyword: Keyword text
        rules: Ordered ruleset
        default: Catch-all category

    Returns:
        Category label
    """
    for rule in rules:
        if rule.matches(keyword):
            return rule.label
    return default


def is_branded_keyword(keyword: str, brand_terms: Iterable[str]) -> bool:
    """True if the keyword contains any of the brand terms (normalized)."""
    return contains_any(keyword, [t for t in brand_terms if t])


class KeywordClassifier:
    """
    Categorizes keywords and flags branded ones.

    Usage:
        classifier = KeywordClassifier(brand_name="lavera", aliases=["lavera naturkosmetik"])
        classifier.classify(records)
    """

    def __init__(
        self,
        brand_name: Optional[str] = None,
        aliases: Iterable[str] = (),
        rules: Optional[Sequence[CategoryRule]] = None,
    ):
        self.brand_terms = [t for t in [brand_name, *aliases] if t]
        self.rules = list(rules) if rules is not None else DEFAULT_CATEGORY_RULES

    def categorize(self, keyword: str) -> str:
        return detect_category(keyword, self.rules)

    def is_branded(self, keyword: str) -> bool:
        return is_branded_keyword(keyword, self.brand_terms)

    def classify(self, records: List[RankedKeywordRecord]) -> List[RankedKeywordRecord]:
        """
        Enrich records in place with category and branded flag.

        Provider-supplied categories are kept; only empty ones are detected.

        Returns:
            The same list, for chaining
        """
        branded = 0
        for record in records:
            if not record.category:
                record.category = self.categorize(record.keyword)
            record.is_branded = self.is_branded(record.keyword)
            branded += record.is_branded

        logger.debug(f"Classified {len(records)} keywords ({branded} branded)")
        return records


def classify_keywords(
    records: List[RankedKeywordRecord],
    brand_name: Optional[str] = None,
    aliases: Iterable[str] = (),
    rules: Optional[Sequence[CategoryRule]] = None,
) -> List[RankedKeywordRecord]:
    """Convenience wrapper around KeywordClassifier.classify."""
    return KeywordClassifier(brand_name, aliases, rules).classify(records)
